import pytest

from drills.linked_list import (
    ListNode,
    add_two_numbers,
    has_cycle,
    merge_two_lists,
    remove_nth_from_end,
)


def _digits(number):
    return ListNode.from_values(int(ch) for ch in reversed(str(number)))


def _to_int(head):
    return int("".join(str(d) for d in reversed(list(head))))


def _nodes(head):
    result = []
    while head is not None:
        result.append(head)
        head = head.next
    return result


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [5, 5, 0, -1]])
def test_from_values_round_trip(values):
    assert list(ListNode.from_values(values)) == values


def test_from_values_empty_is_none():
    assert ListNode.from_values([]) is None


@pytest.mark.parametrize(
    "a,b", [(342, 465), (0, 0), (999, 1), (9999999, 9999), (5, 5), (12, 987654)]
)
def test_add_two_numbers_sums(a, b):
    assert _to_int(add_two_numbers(_digits(a), _digits(b))) == a + b


def test_add_two_numbers_carry_adds_digit():
    result = list(add_two_numbers(_digits(999), _digits(1)))
    assert len(result) == 4
    assert result[-1] == 1


def test_add_two_numbers_leaves_inputs_intact():
    l1, l2 = _digits(57), _digits(68)
    add_two_numbers(l1, l2)
    assert _to_int(l1) == 57
    assert _to_int(l2) == 68


def test_has_cycle_detects_loop():
    head = ListNode.from_values([3, 2, 0, -4])
    nodes = _nodes(head)
    nodes[-1].next = nodes[1]
    assert has_cycle(head) is True


def test_has_cycle_self_loop():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_has_cycle_false_for_plain_list(values):
    assert has_cycle(ListNode.from_values(values)) is False


@pytest.mark.parametrize(
    "a,b",
    [([1, 2, 4], [1, 3, 4]), ([], []), ([], [0]), ([1, 5, 9], [2]), ([7], [])],
)
def test_merge_two_lists_sorted(a, b):
    merged = merge_two_lists(ListNode.from_values(a), ListNode.from_values(b))
    assert (list(merged) if merged else []) == sorted(a + b)


def test_merge_two_lists_reuses_nodes():
    l1 = ListNode.from_values([1, 3, 5])
    l2 = ListNode.from_values([2, 4, 6])
    originals = {id(n) for n in _nodes(l1) + _nodes(l2)}
    merged = merge_two_lists(l1, l2)
    assert {id(n) for n in _nodes(merged)} == originals


def test_merge_two_lists_tie_takes_second_first():
    first = ListNode(1)
    second = ListNode(1)
    merged = merge_two_lists(first, second)
    assert merged is second
    assert merged.next is first


@pytest.mark.parametrize(
    "values,n", [([1, 2, 3, 4], 2), ([5], 1), ([1, 2], 2), ([1, 2, 3], 1)]
)
def test_remove_nth_from_end(values, n):
    expected = list(values)
    del expected[-n]
    result = remove_nth_from_end(ListNode.from_values(values), n)
    assert (list(result) if result else []) == expected


def test_remove_nth_from_end_head_removed():
    head = ListNode.from_values([1, 2, 3])
    second = head.next
    assert remove_nth_from_end(head, 3) is second


@pytest.mark.parametrize("n", [0, -1, 4])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(ListNode.from_values([1, 2, 3]), n)