"""
Node of the AVL tree and the structural primitives working on it.
An absent child is always ``None`` and counts as height 0.
"""


class AvlNode(object):
    __slots__ = ('key', 'height', 'left', 'right')

    def __init__(self, key, left=None, right=None):
        self.key = key
        self.left = left
        self.right = right
        self.height = 1
        if left is not None or right is not None:
            update_height(self)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        return '<Node {key} h={height}>'.format(key=self.key, height=self.height)


def height(node) -> int:
    if node is None:
        return 0
    return node.height


def balance_factor(node) -> int:
    """Right height minus left height, 0 for an absent node."""
    if node is None:
        return 0
    return height(node.right) - height(node.left)


def update_height(node):
    node.height = max(height(node.left), height(node.right)) + 1


def rotate_left(node):
    """
    Promote ``node.right`` to subtree root. The promoted node's left child
    becomes ``node``'s right child.
    :return: new root of the subtree.
    """
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    update_height(node)
    update_height(pivot)
    return pivot


def rotate_right(node):
    """Mirror image of rotate_left()."""
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    update_height(node)
    update_height(pivot)
    return pivot
