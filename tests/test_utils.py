import pytest

from weightgraph.classes import DisjointSet


def test_singletons_until_joined():
    ds = DisjointSet("abcd")
    assert ds.count() == 4
    assert not ds.connected("a", "b")


def test_union_merges_partitions():
    ds = DisjointSet("abcd")
    assert ds.union("a", "b")
    assert ds.union("c", "d")
    assert ds.union("b", "d")
    assert ds.connected("a", "c")
    assert ds.count() == 1


def test_union_within_partition_is_rejected():
    ds = DisjointSet("abc")
    ds.union("a", "b")
    assert not ds.union("b", "a")
    assert ds.count() == 2


def test_find_unknown_item_raises():
    with pytest.raises(KeyError):
        DisjointSet().find("x")
