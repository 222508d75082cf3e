import logging

import pytest

from avlmerge import EmptyTreeError, METHODS_TO_LOG, open_tree
from avlmerge.constants import LOG_FILE_NAME
from avlmerge.tree import AvlTree
from avlmerge.wrapper import log_wrapper, close_log


def test_local_log(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    tree = open_tree([1, 2, 3], log='local')
    tree.insert(4)
    assert tree.flatten() == [1, 2, 3, 4]
    close_log(tree)

    content = (tmp_path / LOG_FILE_NAME).read_text()
    assert 'Called: insert(4)' in content
    assert 'Called: flatten()' in content


def test_log_exception(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    tree = log_wrapper(AvlTree(), ('min',))
    with pytest.raises(EmptyTreeError):
        tree.min()
    close_log(tree)
    assert 'EmptyTreeError' in (tmp_path / LOG_FILE_NAME).read_text()


def test_class_is_untouched(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    tree = log_wrapper(AvlTree(1), METHODS_TO_LOG)
    assert 'insert' in vars(tree)
    assert 'insert' not in vars(AvlTree(2))
    close_log(tree)


def test_unknown_mode():
    with pytest.raises(ValueError):
        log_wrapper(AvlTree(), ('min',), log_mode='smoke')


def test_registry_does_not_grow(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    registered = len(logging.Logger.manager.loggerDict)
    for key in range(50):
        close_log(log_wrapper(AvlTree(key), ('insert',)))
    assert len(logging.Logger.manager.loggerDict) == registered


def test_trees_share_one_handler(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    first = log_wrapper(AvlTree(1), ('insert',))
    second = log_wrapper(AvlTree(1), ('insert',))
    assert first._logger is second._logger
    assert len(first._logger.handlers) == 1
    first.insert(2)
    second.insert(3)
    close_log(first)
    # the handler outlives the first tree while the second still uses it
    second.insert(4)
    close_log(second)

    lines = (tmp_path / LOG_FILE_NAME).read_text().splitlines()
    assert [line.split(' at ')[0] for line in lines] == \
           ['Called: insert(2)', 'Called: insert(3)', 'Called: insert(4)']


def test_keys_goes_through_logged_flatten(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    tree = log_wrapper(AvlTree.from_sorted([1, 2]), ('flatten',))
    assert tree.keys() == [1, 2]
    close_log(tree)
    assert 'Called: flatten()' in (tmp_path / LOG_FILE_NAME).read_text()
