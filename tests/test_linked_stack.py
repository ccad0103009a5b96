"""Tests for lifo.linked_stack.LinkedStack -- node chain bookkeeping."""

from __future__ import annotations

from lifo.linked_stack import LinkedStack, _Node


def _chain_length(stack: LinkedStack) -> int:
    count = 0
    node = stack._top
    while node is not None:
        count += 1
        node = node.next
    return count


class TestLinkedStackChain:
    """The chain from top holds exactly size() nodes."""

    def test_empty_stack_has_no_top(self) -> None:
        stack: LinkedStack[int] = LinkedStack()
        assert stack._top is None
        assert stack.size() == 0

    def test_push_links_new_node_to_previous_top(self) -> None:
        stack: LinkedStack[int] = LinkedStack()
        stack.push(1)
        first = stack._top
        stack.push(2)
        assert stack._top is not None
        assert stack._top.element == 2
        assert stack._top.next is first

    def test_chain_length_matches_size(self) -> None:
        stack: LinkedStack[int] = LinkedStack()
        for i in range(7):
            stack.push(i)
            assert _chain_length(stack) == stack.size()
        for _ in range(3):
            stack.pop()
            assert _chain_length(stack) == stack.size()

    def test_last_node_has_no_next(self) -> None:
        stack: LinkedStack[str] = LinkedStack()
        for item in "abc":
            stack.push(item)
        node = stack._top
        assert node is not None
        while node.next is not None:
            node = node.next
        assert node.element == "a"

    def test_pop_unlinks_top(self) -> None:
        stack: LinkedStack[int] = LinkedStack()
        stack.push(1)
        stack.push(2)
        second = stack._top.next  # type: ignore[union-attr]
        assert stack.pop() == 2
        assert stack._top is second

    def test_clear_drops_chain(self) -> None:
        stack: LinkedStack[int] = LinkedStack()
        for i in range(5):
            stack.push(i)
        stack.clear()
        assert stack._top is None
        assert stack.size() == 0

    def test_node_uses_slots(self) -> None:
        node = _Node(1)
        assert not hasattr(node, "__dict__")
        assert node.next is None

    def test_repr_lists_elements_top_first(self) -> None:
        stack: LinkedStack[int] = LinkedStack()
        stack.push(1)
        stack.push(2)
        assert repr(stack) == "LinkedStack([2, 1])"
