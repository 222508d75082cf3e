from avlmerge.node import AvlNode, height, balance_factor, rotate_left, rotate_right


def test_absent_node():
    assert height(None) == 0
    assert balance_factor(None) == 0


def test_leaf():
    node = AvlNode(5)
    assert node.height == 1
    assert node.is_leaf
    assert balance_factor(node) == 0


def test_height_from_children():
    node = AvlNode(2, left=AvlNode(1))
    assert node.height == 2
    assert balance_factor(node) == -1
    node = AvlNode(2, left=AvlNode(1), right=AvlNode(4, right=AvlNode(5)))
    assert node.height == 3
    assert balance_factor(node) == 1


def test_rotate_left():
    # 1 -> 2 -> 3 chain to the right
    inner = AvlNode(2, left=AvlNode(1.5), right=AvlNode(3))
    root = AvlNode(1, right=inner)
    new_root = rotate_left(root)
    assert new_root is inner
    assert new_root.left is root
    assert root.right.key == 1.5
    assert root.height == 2 and new_root.height == 3
    assert new_root.right.key == 3


def test_rotate_right():
    inner = AvlNode(2, left=AvlNode(1), right=AvlNode(2.5))
    root = AvlNode(3, left=inner)
    new_root = rotate_right(root)
    assert new_root is inner
    assert new_root.right is root
    assert root.left.key == 2.5
    assert root.height == 2 and new_root.height == 3
    assert balance_factor(new_root) == 1


def test_rotations_are_inverse():
    root = AvlNode(2, left=AvlNode(1), right=AvlNode(4, left=AvlNode(3), right=AvlNode(5)))
    back = rotate_right(rotate_left(root))
    assert back is root
    assert (back.left.key, back.key, back.right.key) == (1, 2, 4)
    assert back.height == 3
