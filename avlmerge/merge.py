"""
Merge two AVL trees, choosing the strategy from their key ranges:
- disjoint ranges: flatten both, concatenate, rebuild (linear).
- overlapping ranges: flatten the smaller one and insert its keys into
  the larger one (min(m, n) * log(m + n)).
"""
import logging

from avlmerge.constants import DEFAULT_LOGGER_NAME, MergeStrategy
from avlmerge.tree import AvlTree
from avlmerge.utils import concat_sorted

logger = logging.getLogger(DEFAULT_LOGGER_NAME)


def _charge(counter, n=1):
    if counter is not None:
        counter.increment(n)


def choose_strategy(tree1: AvlTree, tree2: AvlTree, counter=None) -> MergeStrategy:
    """
    Decide from the four boundary keys only. Both trees must be non-empty.
    """
    _charge(counter)
    if tree1.max() < tree2.min() or tree2.max() < tree1.min():
        return MergeStrategy.DISJOINT
    return MergeStrategy.REINSERT


def merge_trees(tree1: AvlTree, tree2: AvlTree, counter=None) -> AvlTree:
    """
    :param counter: ComparisonCounter charged by every step of the merge (range check,
                    flattening, rebuild or reinsertion), defaults to the one of tree1.
                    The returned tree keeps it.
    :return: the merged tree. Both inputs are consumed: the returned tree is
             either a new one or one of the inputs, any other input is cleared.
             Keys present in both trees appear once.
    """
    if counter is None:
        counter = tree1.counter
    if tree1 is tree2 or not len(tree2):
        tree1.last_merge_strategy = None
        return tree1
    if not len(tree1):
        tree2.last_merge_strategy = None
        return tree2

    if counter is not None:
        tree1.counter = tree2.counter = counter
    strategy = choose_strategy(tree1, tree2, counter)
    logger.debug('Merging trees of {m} and {n} keys with {strategy}.'.format(
        m=len(tree1), n=len(tree2), strategy=strategy.name))

    if strategy is MergeStrategy.DISJOINT:
        merged_keys = concat_sorted(tree1.flatten(), tree2.flatten())
        _charge(counter, len(merged_keys))
        # ranges do not overlap, so the concatenation is strictly ascending
        result = AvlTree.from_sorted(merged_keys, validate=tree1.conf.validate, counter=counter, trusted=True)
        tree1.clear()
        tree2.clear()
    else:
        _charge(counter)
        if len(tree1) < len(tree2):
            smaller, larger = tree1, tree2
        else:
            smaller, larger = tree2, tree1
        larger.insert_many(smaller.flatten())
        smaller.clear()
        result = larger

    result.last_merge_strategy = strategy
    logger.debug('Merged tree holds {size} keys, height {height}.'.format(size=len(result), height=result.height))
    return result
