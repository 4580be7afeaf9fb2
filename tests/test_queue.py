import threading

import pytest

from webspider.queue import PriorityQueue, Queue, Stack, Strategy


def test_priority_queue_pops_lowest_first():
    queue = PriorityQueue()
    queue.push("lower", 3)
    queue.push("higher", 4)
    queue.push("lowest", 1)

    assert queue.pop() == "lowest"
    assert queue.pop() == "lower"
    assert queue.pop() == "higher"


def test_priority_queue_empty_pop_returns_none():
    queue = PriorityQueue()
    assert queue.pop() is None
    assert len(queue) == 0


def test_priority_queue_len():
    queue = PriorityQueue()
    queue.push("a", 1)
    queue.push("b", 2)
    assert len(queue) == 2
    queue.pop()
    assert len(queue) == 1


def test_stack_is_lifo():
    stack = Stack()
    stack.push("lower")
    stack.push("higher")
    stack.push("lowest")

    assert stack.pop() == "lowest"
    assert stack.pop() == "higher"
    assert stack.pop() == "lower"
    assert stack.pop() is None


def test_stack_len():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    assert len(stack) == 2


@pytest.mark.parametrize(
    "name, expected",
    [("breadth-first", Strategy.BREADTH_FIRST), ("depth-first", Strategy.DEPTH_FIRST)],
)
def test_strategy_from_name(name, expected):
    assert Strategy.from_name(name) is expected
    assert str(expected) == name


def test_strategy_unknown_name():
    with pytest.raises(ValueError, match="unsupported strategy"):
        Strategy.from_name("random")


def test_queue_unknown_strategy():
    with pytest.raises(ValueError):
        Queue("sideways", 0)


def test_breadth_first_queue_orders_by_priority():
    queue = Queue("breadth-first", 0)
    queue.push("c", 3)
    queue.push("a", 1)
    queue.push("b", 2)
    assert len(queue) == 3
    assert list(queue.pop()) == ["a", "b", "c"]
    assert len(queue) == 0


def test_depth_first_queue_is_lifo():
    queue = Queue("depth-first", 0)
    queue.push("first", 5)
    queue.push("second", 1)
    queue.push("third", 9)
    assert list(queue.pop()) == ["third", "second", "first"]


def test_queue_pop_waits_for_late_items():
    queue = Queue("depth-first", 2)
    queue.poll_interval = 0.05
    timer = threading.Timer(0.2, queue.push, args=("late", 0))
    timer.start()
    try:
        items = queue.pop()
        assert next(items) == "late"
    finally:
        timer.join()