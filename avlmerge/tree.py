"""
This file include the AVL tree: single-key and bulk construction,
insertion with rebalancing, flattening and boundary queries.

"""
import logging
from typing import Sequence

from avlmerge.constants import DEFAULT_LOGGER_NAME, TreeConf
from avlmerge.node import AvlNode, height, balance_factor, update_height, rotate_left, rotate_right
from avlmerge.utils import EmptyTreeError, InvalidInputError, is_strictly_ascending

logger = logging.getLogger(DEFAULT_LOGGER_NAME)

_MISSING = object()


class AvlTree(object):
    """
    Height-balanced binary search tree of distinct, totally ordered keys.
    Inserting a key that already exists leaves the tree unchanged.
    Not thread safe, see SharedTree for concurrent use.
    """

    def __init__(self, key=_MISSING, *, counter=None, validate=True):
        """
        :param key: key of the single root node, omit it for an empty tree.
        :param counter: optional ComparisonCounter charged by every operation.
        :param validate: check the input of bulk builds started from this tree.
        """
        self._conf = TreeConf(validate=validate, counter=counter)
        self.last_merge_strategy = None
        if key is _MISSING:
            self._root, self._size = None, 0
        else:
            self._root, self._size = AvlNode(key), 1

    @classmethod
    def from_sorted(cls, keys: Sequence, *, validate=True, counter=None, trusted=False):
        """
        Build a balanced tree from keys sorted ascending, without duplicates,
        in O(n): the median of each range becomes the subtree root.
        :param trusted: skip the order check for this call only, the tree still
                        records `validate` in its conf.
        :raise InvalidInputError: `validate` is set and keys are not strictly ascending.
        """
        if not isinstance(keys, (list, tuple)):
            keys = list(keys)
        if validate and not trusted and not is_strictly_ascending(keys):
            raise InvalidInputError('keys must be sorted ascending without duplicates')

        tree = cls(counter=counter, validate=validate)
        if keys:
            tree._root = tree._build(keys, 0, len(keys) - 1)
            tree._size = len(keys)
        logger.debug('Built tree of {size} keys, height {height}.'.format(size=tree._size, height=tree.height))
        return tree

    def _build(self, keys, lo, hi):
        # lower middle on even-length ranges
        mid = lo + (hi - lo) // 2
        node = AvlNode(keys[mid])

        self._count(2)
        if lo < mid:
            node.left = self._build(keys, lo, mid - 1)
        if mid < hi:
            node.right = self._build(keys, mid + 1, hi)

        update_height(node)
        return node

    def _count(self, n=1):
        if self._conf.counter is not None:
            self._conf.counter.increment(n)

    def insert(self, key):
        """
        Insert a key and rebalance on the way back up.
        :return: the tree itself, so inserts can be chained.
        """
        self._root = self._insert(self._root, key)
        return self

    def insert_many(self, keys):
        for key in keys:
            self._root = self._insert(self._root, key)
        return self

    def _insert(self, node, key):
        self._count()
        if node is None:
            self._size += 1
            return AvlNode(key)
        elif key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node  # duplicate

        update_height(node)
        balance = balance_factor(node)

        self._count()
        # left heavy
        if balance < -1:
            if key < node.left.key:
                return rotate_right(node)
            node.left = rotate_left(node.left)
            return rotate_right(node)
        # right heavy
        if balance > 1:
            if key > node.right.key:
                return rotate_left(node)
            node.right = rotate_right(node.right)
            return rotate_left(node)
        return node

    def flatten(self) -> list:
        """
        In-order walk of the tree in O(n).
        :return: all keys, ascending.
        """
        out = list()

        def recurse(node):
            self._count()
            if node.left is not None:
                recurse(node.left)
            out.append(node.key)
            self._count()
            if node.right is not None:
                recurse(node.right)

        if self._root is not None:
            recurse(self._root)
        return out

    def keys(self) -> list:
        return self.flatten()

    def min(self):
        """Key of the leftmost node."""
        if self._root is None:
            raise EmptyTreeError('min() of an empty tree')
        node = self._root
        while node.left is not None:
            self._count()
            node = node.left
        return node.key

    def max(self):
        """Key of the rightmost node."""
        if self._root is None:
            raise EmptyTreeError('max() of an empty tree')
        node = self._root
        while node.right is not None:
            self._count()
            node = node.right
        return node.key

    def clear(self):
        """Drop every node; the released structure is reclaimed as a whole."""
        self._root, self._size = None, 0

    def is_valid(self) -> bool:
        """
        Check the BST ordering, the AVL balance, the cached heights and
        the size of the whole tree.
        """

        def recurse(node, low, high):
            # :return: number of nodes in this subtree, or -1 if broken
            if node is None:
                return 0
            if (low is not _MISSING and not low < node.key) or \
                    (high is not _MISSING and not node.key < high):
                return -1
            if abs(balance_factor(node)) > 1 or \
                    node.height != max(height(node.left), height(node.right)) + 1:
                return -1
            left = recurse(node.left, low, node.key)
            right = recurse(node.right, node.key, high)
            if left < 0 or right < 0:
                return -1
            return left + right + 1

        return recurse(self._root, _MISSING, _MISSING) == self._size

    @property
    def root(self):
        return self._root

    @property
    def size(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        return height(self._root)

    @property
    def conf(self) -> TreeConf:
        return self._conf

    @property
    def counter(self):
        return self._conf.counter

    @counter.setter
    def counter(self, counter):
        self._conf = self._conf._replace(counter=counter)

    def __contains__(self, key):
        """Support for keyword 'in' operator."""
        node = self._root
        while node is not None:
            self._count()
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    def __len__(self):
        """Support for len() built-in function."""
        return self._size

    def __repr__(self):
        def recurse(node, all_items, depth, tag):
            all_items.append(('  ' * depth) + tag + repr(node))
            for child, child_tag in ((node.left, 'L: '), (node.right, 'R: ')):
                if child is not None:
                    recurse(child, all_items, depth + 1, child_tag)

        if self._root is None:
            return '<AvlTree (empty)>'
        _all = list()
        recurse(self._root, _all, 0, '')
        return '\n'.join(_all)
