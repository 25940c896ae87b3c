import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.linked_list import (
    ListNode,
    detect_and_remove_loop,
    from_iterable,
    middle,
    push_front,
    remove_nth_from_end,
    reverse_between,
    rotate_left,
    swap_nodes,
    to_list,
)

int_lists = st.lists(st.integers(-100, 100), max_size=30)


@given(int_lists)
def test_round_trip(values):
    assert to_list(from_iterable(values)) == values


def test_empty_list_is_none():
    assert from_iterable([]) is None
    assert to_list(None) == []


def test_node_iteration_matches_to_list():
    head = from_iterable([4, 5, 6])
    assert list(head) == to_list(head) == [4, 5, 6]


def test_push_front_builds_reversed():
    head = None
    for value in [1, 2, 3]:
        head = push_front(head, value)
    assert to_list(head) == [3, 2, 1]


@given(st.lists(st.integers(), unique=True, min_size=2, max_size=20), st.data())
def test_swap_nodes_relinks(values, data):
    i = data.draw(st.integers(0, len(values) - 1))
    j = data.draw(st.integers(0, len(values) - 1))
    head = from_iterable(values)
    nodes_before = {node.value: node for node in _iter_nodes(head)}
    head = swap_nodes(head, values[i], values[j])
    expected = list(values)
    expected[i], expected[j] = expected[j], expected[i]
    assert to_list(head) == expected
    for node in _iter_nodes(head):
        assert nodes_before[node.value] is node


def _iter_nodes(head):
    while head is not None:
        yield head
        head = head.next


def test_swap_nodes_missing_value_unchanged():
    head = from_iterable([1, 2, 3])
    assert to_list(swap_nodes(head, 1, 9)) == [1, 2, 3]


def test_swap_nodes_same_value_unchanged():
    head = from_iterable([1, 2, 3])
    assert swap_nodes(head, 2, 2) is head


def test_swap_adjacent_head():
    head = swap_nodes(from_iterable([1, 2, 3]), 1, 2)
    assert to_list(head) == [2, 1, 3]


def test_rotate_left_example():
    head = rotate_left(from_iterable([10, 20, 30, 40, 50, 60]), 4)
    assert to_list(head) == [50, 60, 10, 20, 30, 40]


@given(st.lists(st.integers(), min_size=1, max_size=20), st.data())
def test_rotate_left_matches_slices(values, data):
    k = data.draw(st.integers(0, len(values) - 1))
    head = rotate_left(from_iterable(values), k)
    assert to_list(head) == values[k:] + values[:k]


@given(st.lists(st.integers(), max_size=10), st.integers(0, 5))
def test_rotate_left_large_k_unchanged(values, extra):
    head = rotate_left(from_iterable(values), len(values) + extra)
    assert to_list(head) == values


def test_rotate_left_negative():
    with pytest.raises(ValueError):
        rotate_left(from_iterable([1, 2]), -1)


@given(st.lists(st.integers(), min_size=1, max_size=20), st.data())
def test_detect_and_remove_loop(values, data):
    head = from_iterable(values)
    nodes = list(_iter_nodes(head))
    target = data.draw(st.integers(0, len(nodes) - 1))
    nodes[-1].next = nodes[target]
    assert detect_and_remove_loop(head) is True
    assert to_list(head) == values
    assert nodes[-1].next is None


@given(int_lists)
def test_detect_no_loop(values):
    head = from_iterable(values)
    assert detect_and_remove_loop(head) is False
    assert to_list(head) == values


def test_middle_of_pushed_list():
    head = None
    for value in [1, 2, 3, 4, 5, 6]:
        head = push_front(head, value)
    assert middle(head) == 3


@given(st.lists(st.integers(), min_size=1, max_size=30))
def test_middle_is_second_middle(values):
    assert middle(from_iterable(values)) == values[len(values) // 2]


def test_middle_empty():
    with pytest.raises(ValueError):
        middle(None)


@given(st.lists(st.integers(), min_size=1, max_size=20), st.data())
def test_reverse_between(values, data):
    start = data.draw(st.integers(1, len(values)))
    end = data.draw(st.integers(start, len(values)))
    head = reverse_between(from_iterable(values), start, end)
    expected = values[: start - 1] + values[start - 1 : end][::-1] + values[end:]
    assert to_list(head) == expected


def test_reverse_between_whole_list():
    head = reverse_between(from_iterable([1, 2, 3, 4]), 1, 4)
    assert to_list(head) == [4, 3, 2, 1]


@pytest.mark.parametrize("start,end", [(0, 2), (3, 2), (2, 5)])
def test_reverse_between_invalid(start, end):
    with pytest.raises(ValueError):
        reverse_between(from_iterable([1, 2, 3]), start, end)


def test_remove_nth_from_end_examples():
    assert to_list(remove_nth_from_end(from_iterable([1, 2, 3, 4, 5]), 2)) == [
        1,
        2,
        3,
        5,
    ]
    assert to_list(remove_nth_from_end(from_iterable([1]), 1)) == []


@given(st.lists(st.integers(), min_size=1, max_size=20), st.integers(1, 30))
def test_remove_nth_from_end_property(values, n):
    head = remove_nth_from_end(from_iterable(values), n)
    expected = list(values)
    if n >= len(values):
        del expected[0]
    else:
        del expected[len(values) - n]
    assert to_list(head) == expected


def test_remove_nth_from_end_errors():
    with pytest.raises(ValueError):
        remove_nth_from_end(None, 1)
    with pytest.raises(ValueError):
        remove_nth_from_end(ListNode(1), 0)