from avlmerge.constants import METHODS_TO_LOG, MergeStrategy, TreeConf
from avlmerge.merge import choose_strategy, merge_trees
from avlmerge.shared import SharedTree
from avlmerge.tree import AvlTree
from avlmerge.utils import ComparisonCounter, EmptyTreeError, InvalidInputError
from avlmerge.wrapper import log_wrapper

__version__ = '1.0.0'

__all__ = ('AvlTree', 'SharedTree', 'ComparisonCounter', 'EmptyTreeError', 'InvalidInputError',
           'MergeStrategy', 'TreeConf', 'choose_strategy', 'merge_trees', 'open_tree')


def open_tree(keys=None, *, validate=True, counter=None, **kwargs):
    """
    :param keys: sorted keys without duplicates to bulk-build from, None for an empty tree.
    :param validate: reject unsorted or duplicated keys with InvalidInputError.
    :param counter: ComparisonCounter charged by operations on the tree.
    :param kwargs: log mode: 'log'='local' (log in local file (avlmerge.log))
                             'log'='tcp' or 'udp': log to concrete 'host' & 'port'
    """
    log_mode = kwargs.pop('log', None)
    host, port = kwargs.pop('host', None), kwargs.pop('port', None)
    if kwargs:
        raise TypeError('Unexpected options: {names}'.format(names=', '.join(sorted(kwargs))))

    if keys is None:
        tree = AvlTree(counter=counter, validate=validate)
    else:
        tree = AvlTree.from_sorted(keys, validate=validate, counter=counter)

    if log_mode == 'tcp' or log_mode == 'udp':
        if host is None or port is None:
            raise ValueError('Host and port of Log Socket should be specified')
        tree = log_wrapper(tree, METHODS_TO_LOG, log_mode=log_mode, host=host, port=port)
    elif log_mode == 'local':
        tree = log_wrapper(tree, METHODS_TO_LOG, log_mode=log_mode)
    elif log_mode is not None:
        raise ValueError('Unknown log mode {mode!r}'.format(mode=log_mode))

    return tree
