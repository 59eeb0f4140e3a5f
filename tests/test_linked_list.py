import pytest

from algobox.linked_list import (
    ListNode,
    SinglyLinkedList,
    from_iterable,
    merge_sorted,
    merge_sorted_recursive,
    reverse_k_group,
    to_list,
)


def test_round_trip():
    values = [5, 1, 4, 2]
    assert to_list(from_iterable(values)) == values
    assert from_iterable([]) is None
    assert to_list(None) == []


def test_reverse_k_group_example():
    head = from_iterable(range(1, 9))
    assert to_list(reverse_k_group(head, 3)) == [3, 2, 1, 6, 5, 4, 7, 8]


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 9])
def test_reverse_k_group_invariants(k):
    values = list(range(9))
    result = to_list(reverse_k_group(from_iterable(values), k))
    assert sorted(result) == values
    full = len(values) // k * k
    for start in range(0, full, k):
        assert result[start:start + k] == values[start:start + k][::-1]
    assert result[full:] == values[full:]


def test_reverse_k_group_longer_than_list_is_unchanged():
    assert to_list(reverse_k_group(from_iterable([1, 2]), 3)) == [1, 2]
    assert reverse_k_group(None, 2) is None


def test_reverse_k_group_rejects_bad_k():
    with pytest.raises(ValueError):
        reverse_k_group(from_iterable([1, 2]), 0)


@pytest.mark.parametrize("merge", [merge_sorted, merge_sorted_recursive])
def test_merge_sorted(merge):
    first, second = [1, 4, 5, 7], [2, 3, 6]
    merged = merge(from_iterable(first), from_iterable(second))
    assert to_list(merged) == sorted(first + second)


@pytest.mark.parametrize("merge", [merge_sorted, merge_sorted_recursive])
def test_merge_sorted_with_empty(merge):
    head = from_iterable([1, 2])
    assert merge(None, head) is head
    assert merge(head, None) is head
    assert merge(None, None) is None


@pytest.mark.parametrize("merge", [merge_sorted, merge_sorted_recursive])
def test_merge_sorted_ties_take_second(merge):
    first = ListNode(1)
    second = ListNode(1)
    merged = merge(first, second)
    assert merged is second
    assert merged.next is first


def test_singly_linked_list_insertions():
    items = SinglyLinkedList()
    items.append(2)
    items.prepend(3)
    items.append(4)
    items.prepend(3)
    assert list(items) == [3, 3, 2, 4]
    assert len(items) == 4
    assert str(items) == "3 -> 3 -> 2 -> 4"


def test_singly_linked_list_prepend_then_append():
    items = SinglyLinkedList()
    items.prepend("b")
    items.append("c")
    items.prepend("a")
    assert list(items) == ["a", "b", "c"]


def test_singly_linked_list_from_values():
    values = [9, 8, 7]
    items = SinglyLinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)
    assert to_list(items.head) == values