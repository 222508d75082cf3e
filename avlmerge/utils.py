"""
  Errors and helper-functions shared by the tree and merge modules.
"""


class EmptyTreeError(Exception):
    """Raise when min/max is queried on a tree without nodes"""
    pass


class InvalidInputError(ValueError):
    """Raise when bulk-build input is unsorted or contains duplicates"""
    pass


class ComparisonCounter(object):
    """
    Counts primitive comparisons performed by measured operations.
    Pass one instance to the trees (and merge) under measurement, call
    reset() before the operation and read `count` after it.
    """
    __slots__ = ('_count',)

    def __init__(self):
        self._count = 0

    def increment(self, n: int = 1):
        self._count += n

    def reset(self):
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def __repr__(self):
        return '<ComparisonCounter {count}>'.format(count=self._count)


def is_strictly_ascending(keys) -> bool:
    """True when every key is smaller than its successor (no duplicates)."""
    return all(prev < nxt for prev, nxt in zip(keys, keys[1:]))


def concat_sorted(first: list, second: list) -> list:
    """
    Concatenate two ascending lists whose ranges do not overlap, the one
    with the smaller minimum first.
    """
    if first and second and second[-1] < first[0]:
        first, second = second, first
    merged = list(first)
    merged.extend(second)
    return merged
