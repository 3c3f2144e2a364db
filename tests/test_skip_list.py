import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.skip_list import SkipList


def test_source_example():
    skip_list = SkipList([5, 4, 3, 2, 1], seed=1)
    skip_list.insert(9)
    assert list(skip_list) == [1, 2, 3, 4, 5, 9]

    node = skip_list.find(3)
    assert node is not None
    assert node.data == 3

    assert skip_list.delete(6) is False
    assert list(skip_list) == [1, 2, 3, 4, 5, 9]
    assert skip_list.delete(5) is True
    assert list(skip_list) == [1, 2, 3, 4, 9]


def test_empty():
    skip_list = SkipList()
    assert list(skip_list) == []
    assert skip_list.find(1) is None
    assert 1 not in skip_list
    assert skip_list.delete(1) is False


def test_contains():
    skip_list = SkipList([10, 20, 30], seed=3)
    assert 20 in skip_list
    assert 25 not in skip_list


def test_duplicates_deleted_one_at_a_time():
    skip_list = SkipList([2, 2, 1], seed=5)
    assert list(skip_list) == [1, 2, 2]
    assert skip_list.delete(2)
    assert list(skip_list) == [1, 2]
    assert skip_list.delete(2)
    assert 2 not in skip_list


@pytest.mark.parametrize("max_level", [1, 2, 16])
def test_random_level_bounds(max_level):
    skip_list = SkipList(max_level=max_level, seed=7)
    levels = [skip_list.random_level() for _ in range(200)]
    assert all(1 <= level <= max_level for level in levels)


def test_single_level_always_one():
    skip_list = SkipList(max_level=1, seed=0)
    assert {skip_list.random_level() for _ in range(20)} == {1}


def test_invalid_max_level():
    with pytest.raises(ValueError):
        SkipList(max_level=0)


def test_seed_is_deterministic():
    first = SkipList(seed=42)
    second = SkipList(seed=42)
    assert [first.random_level() for _ in range(30)] == [
        second.random_level() for _ in range(30)
    ]


def test_node_levels_and_links():
    values = list(range(50))
    skip_list = SkipList(values, max_level=8, seed=11)
    for value in values:
        node = skip_list.find(value)
        assert node is not None
        assert 1 <= node.level <= skip_list.max_level
        assert all(link is None for link in node.forwards[node.level:])
        for link in node.forwards[: node.level]:
            assert link is None or link.data > node.data


@given(
    st.lists(st.integers(-30, 30)),
    st.lists(st.integers(-30, 30)),
    st.integers(0, 1000),
)
def test_matches_sorted_list(inserted, deleted, seed):
    skip_list = SkipList(inserted, max_level=6, seed=seed)
    expected = sorted(inserted)
    assert list(skip_list) == expected
    for value in deleted:
        present = value in expected
        assert skip_list.delete(value) == present
        if present:
            expected.remove(value)
    assert list(skip_list) == expected
    for value in set(inserted):
        assert (value in skip_list) == (value in expected)