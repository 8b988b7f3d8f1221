import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.containers import ContainerOverflow, ContainerUnderflow, Queue, Stack


def test_stack_pops_in_reverse_push_order():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert len(stack) == 0


def test_stack_iterates_from_top():
    stack = Stack(5)
    for value in (10, 20, 30):
        stack.push(value)
    assert list(stack) == [30, 20, 10]


def test_stack_overflow_at_capacity():
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(ContainerOverflow):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_stack_underflow_when_empty():
    with pytest.raises(ContainerUnderflow):
        Stack().pop()


def test_zero_capacity_stack_is_always_full():
    with pytest.raises(ContainerOverflow):
        Stack(0).push(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)
    with pytest.raises(ValueError):
        Queue(-1)


def test_queue_is_first_in_first_out():
    queue = Queue()
    for value in ("a", "b", "c"):
        queue.enqueue(value)
    assert queue.dequeue() == "a"
    assert list(queue) == ["b", "c"]
    assert len(queue) == 2


def test_queue_overflow_and_reuse_after_dequeue():
    queue = Queue(1)
    queue.enqueue(4)
    with pytest.raises(ContainerOverflow):
        queue.enqueue(5)
    assert queue.dequeue() == 4
    queue.enqueue(5)
    assert list(queue) == [5]


def test_queue_underflow_when_empty():
    queue = Queue()
    queue.enqueue(1)
    queue.dequeue()
    with pytest.raises(ContainerUnderflow):
        queue.dequeue()


def test_overflow_and_underflow_are_standard_errors():
    with pytest.raises(OverflowError):
        Queue(0).enqueue(1)
    with pytest.raises(IndexError):
        Stack().pop()


@given(st.lists(st.integers()))
def test_stack_round_trip(values):
    stack = Stack()
    for value in values:
        stack.push(value)
    assert list(stack) == values[::-1]
    assert [stack.pop() for _ in values] == values[::-1]


@given(st.lists(st.integers()))
def test_queue_round_trip(values):
    queue = Queue(len(values))
    for value in values:
        queue.enqueue(value)
    assert list(queue) == values
    assert [queue.dequeue() for _ in values] == values