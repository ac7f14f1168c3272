"""Property test: null elision laws.

Uses hypothesis to verify that remove_nulls is idempotent, leaves no null
behind in containers and never drops non-null data or empty containers.
"""

from hypothesis import given, settings

from monky_utilities.serdes.mapper import remove_nulls

from json_strategies import json_trees


def _has_nested_null(tree) -> bool:
    if isinstance(tree, dict):
        return any(v is None or _has_nested_null(v) for v in tree.values())
    if isinstance(tree, list):
        return any(v is None or _has_nested_null(v) for v in tree)
    return False


@given(tree=json_trees)
@settings(max_examples=200)
def test_idempotent(tree):
    once = remove_nulls(tree)
    assert remove_nulls(once) == once


@given(tree=json_trees)
@settings(max_examples=200)
def test_no_nulls_left_in_containers(tree):
    assert not _has_nested_null(remove_nulls(tree))


@given(tree=json_trees)
@settings(max_examples=200)
def test_container_type_preserved(tree):
    cleaned = remove_nulls(tree)
    assert type(cleaned) is type(tree)


@given(tree=json_trees)
@settings(max_examples=200)
def test_null_free_tree_unchanged(tree):
    if not _has_nested_null(tree):
        assert remove_nulls(tree) == tree


def test_empties_preserved():
    assert remove_nulls({}) == {}
    assert remove_nulls([]) == []
