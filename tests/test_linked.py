import pytest

from algonotes.linked import (
    Node,
    from_iterable,
    intersect_point,
    merge_two,
    remove_nth_from_end,
    to_list,
)


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [5, -4, 5, 0]])
def test_round_trip(values):
    head = from_iterable(values)
    assert to_list(head) == values
    assert list(head) == values


def test_empty_round_trip():
    assert from_iterable([]) is None
    assert to_list(None) == []


def test_iteration_starts_at_node():
    head = from_iterable([10, 15, 30])
    assert list(head.next) == [15, 30]


def test_intersection_source_example():
    head1 = from_iterable([10, 15, 30])
    head2 = from_iterable([3, 6, 9])
    head2.next.next.next = head1.next
    assert intersect_point(head1, head2) is head1.next


def test_no_intersection_with_equal_values():
    head1 = from_iterable([1, 2, 3])
    head2 = from_iterable([1, 2, 3])
    assert intersect_point(head1, head2) is None


def test_intersection_with_empty_list():
    assert intersect_point(None, from_iterable([1])) is None
    assert intersect_point(from_iterable([1]), None) is None


def test_intersection_at_head():
    shared = from_iterable([7, 8])
    assert intersect_point(shared, shared) is shared


@pytest.mark.parametrize(
    "left, right",
    [([1, 3, 5, 7], []), ([], [2, 4]), ([1, 4, 9], [2, 3, 10, 11]), ([2, 2], [2, 2])],
)
def test_merge_is_sorted_union(left, right):
    merged = merge_two(from_iterable(left), from_iterable(right))
    assert to_list(merged) == sorted(left + right)


def test_merge_relinks_nodes_and_prefers_first_on_ties():
    a = Node(2)
    b = Node(2)
    merged = merge_two(a, b)
    assert merged is a
    assert merged.next is b


def test_merge_both_empty():
    assert merge_two(None, None) is None


def test_remove_nth_source_example():
    head = remove_nth_from_end(from_iterable([1, 2, 3, 4, 5]), 2)
    assert to_list(head) == [1, 2, 3, 5]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
def test_remove_nth_drops_right_value(n):
    values = [10, 20, 30, 40, 50, 60]
    head = remove_nth_from_end(from_iterable(values), n)
    position = len(values) - n
    assert to_list(head) == values[:position] + values[position + 1:]


def test_remove_nth_longer_than_list_is_unchanged():
    head = from_iterable([1, 2])
    assert remove_nth_from_end(head, 3) is head
    assert to_list(head) == [1, 2]


def test_remove_only_node():
    assert remove_nth_from_end(Node(1), 1) is None


def test_remove_from_empty():
    assert remove_nth_from_end(None, 1) is None


@pytest.mark.parametrize("n", [0, -1])
def test_remove_nth_rejects_non_positive(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(from_iterable([1, 2, 3]), n)