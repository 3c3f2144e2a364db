from hypothesis import given
from hypothesis import strategies as st

from dsalgo.list_apps import (
    has_cycle,
    is_palindrome,
    is_palindrome_recursive,
    lru_access,
)
from dsalgo.single_list import Node, SingleList


def test_has_cycle_empty_and_single():
    assert has_cycle(None) is False
    assert has_cycle(Node(1)) is False


def test_has_cycle_straight_list():
    lst = SingleList(range(7))
    assert has_cycle(lst.first()) is False


def test_has_cycle_detects_loop():
    lst = SingleList(range(7))
    tail = lst.tail()
    middle = lst.middle_node()
    tail.next = middle
    assert has_cycle(lst.first()) is True


def test_has_cycle_self_loop():
    node = Node("x")
    node.next = node
    assert has_cycle(node) is True


def _run_lru(sequence, size=10):
    cache = SingleList()
    for value in sequence:
        lru_access(cache, value, size)
    return cache


def test_lru_sequence_from_source_example():
    sequence = list(range(10)) + [15 - i for i in range(10, 13)] + [0, 0]
    cache = _run_lru(sequence)
    assert list(cache) == [0, 3, 4, 5, 9, 8, 7, 6, 2, 1]
    assert cache.tail().data == 1


def test_lru_new_value_goes_first():
    cache = _run_lru(["a", "b", "c"])
    assert list(cache) == ["c", "b", "a"]


def test_lru_evicts_least_recent_when_full():
    cache = _run_lru([1, 2, 3], size=3)
    lru_access(cache, 4, 3)
    assert list(cache) == [4, 3, 2]
    assert len(cache) == 3
    assert cache.tail().data == 2


@given(st.lists(st.integers(0, 6), max_size=40), st.integers(1, 5))
def test_lru_invariants(sequence, size):
    cache = _run_lru(sequence, size)
    values = list(cache)
    assert len(values) <= size
    assert len(values) == len(set(values))
    if sequence:
        assert values[0] == sequence[-1]
        # The cache holds exactly the most recent distinct values.
        recent = []
        for value in reversed(sequence):
            if value not in recent:
                recent.append(value)
        assert values == recent[:size]


def test_palindrome_source_example():
    text = SingleList()
    for i in range(3):
        text.insert_head(chr(ord("a") + i))
    for i in range(2):
        text.insert_tail(chr(ord("b") + i))
    assert list(text) == ["c", "b", "a", "b", "c"]
    assert is_palindrome(text) is True
    assert list(text) == ["c", "b", "a", "b", "c"]


def test_palindrome_negative_and_trivial():
    assert is_palindrome(SingleList()) is True
    assert is_palindrome(SingleList("a")) is True
    assert is_palindrome(SingleList("abba")) is True
    assert is_palindrome(SingleList("ab")) is False
    assert is_palindrome(SingleList("abca")) is False


def test_recursive_palindrome_consumes_list():
    text = SingleList("abcba")
    assert is_palindrome_recursive(text) is True
    assert len(text) <= 1


def test_recursive_palindrome_stops_at_mismatch():
    text = SingleList("xabcy")
    assert is_palindrome_recursive(text) is False
    assert list(text) == list("xabcy")


@given(st.text(alphabet="ab", max_size=12))
def test_both_palindrome_checks_agree(s):
    expected = s == s[::-1]
    assert is_palindrome(SingleList(s)) is expected
    assert is_palindrome_recursive(SingleList(s)) is expected