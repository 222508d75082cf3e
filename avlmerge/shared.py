"""
Reader/writer-locked facade over AvlTree for trees shared between threads.
The tree itself does no locking.
"""
import logging

import rwlock

from avlmerge.constants import DEFAULT_LOGGER_NAME
from avlmerge.merge import merge_trees
from avlmerge.tree import AvlTree

logger = logging.getLogger(DEFAULT_LOGGER_NAME)


class SharedTree(object):
    """
    Serialize access to one AvlTree: many readers or a single writer at a time.
    """
    __slots__ = ('_tree', '_lock')

    def __init__(self, tree: AvlTree = None):
        self._tree = tree if tree is not None else AvlTree()
        self._lock = rwlock.RWLock()

    @property
    def write_transaction(self):
        class WriteTransaction:
            def __enter__(_self):
                self._lock.writer_lock.acquire()
                return self._tree

            def __exit__(_self, exc_type, exc_val, exc_tb):
                self._lock.writer_lock.release()

        return WriteTransaction()

    @property
    def read_transaction(self):
        class ReadTransaction:
            def __enter__(_self):
                self._lock.reader_lock.acquire()
                return self._tree

            def __exit__(_self, exc_type, exc_val, exc_tb):
                self._lock.reader_lock.release()

        return ReadTransaction()

    def insert(self, key):
        with self.write_transaction as tree:
            tree.insert(key)
        return self

    def insert_many(self, keys):
        with self.write_transaction as tree:
            tree.insert_many(keys)
        return self

    def flatten(self) -> list:
        with self.read_transaction as tree:
            return tree.flatten()

    def min(self):
        with self.read_transaction as tree:
            return tree.min()

    def max(self):
        with self.read_transaction as tree:
            return tree.max()

    def merge(self, other: 'SharedTree'):
        """
        Merge `other` into this tree. `other` is left empty.
        """
        if other is self:
            return self
        # fixed lock order avoids deadlock between a.merge(b) and b.merge(a)
        first, second = sorted((self, other), key=id)
        with first.write_transaction, second.write_transaction:
            self._tree = merge_trees(self._tree, other._tree)
            other._tree = AvlTree(counter=other._tree.counter, validate=other._tree.conf.validate)
        logger.debug('Shared tree now holds {size} keys.'.format(size=len(self._tree)))
        return self

    def __contains__(self, key):
        with self.read_transaction as tree:
            return key in tree

    def __len__(self):
        with self.read_transaction as tree:
            return len(tree)

    def __repr__(self):
        with self.read_transaction as tree:
            return '<SharedTree {size} keys>'.format(size=len(tree))
