import pytest

from labstructs.priority_queue import (
    MinPriorityQueue,
    PriorityQueueEmptyError,
    PriorityQueueFullError,
)

VALUES = [9, 4, 7, 1, 8, 4, 2, 6]


def assert_heap(queue):
    heap = list(queue)
    for i in range(1, len(heap)):
        assert heap[(i - 1) // 2] <= heap[i]


@pytest.fixture
def queue():
    q = MinPriorityQueue(len(VALUES))
    for v in VALUES:
        q.insert(v)
    return q


def test_heap_property_after_inserts(queue):
    assert_heap(queue)
    assert len(queue) == len(VALUES)
    assert sorted(queue) == sorted(VALUES)


def test_minimum_does_not_remove(queue):
    assert queue.minimum() == min(VALUES)
    assert len(queue) == len(VALUES)


def test_extract_in_sorted_order(queue):
    out = [queue.extract_min() for _ in range(len(VALUES))]
    assert out == sorted(VALUES)
    assert len(queue) == 0


def test_empty_errors():
    q = MinPriorityQueue(3)
    with pytest.raises(PriorityQueueEmptyError):
        q.minimum()
    with pytest.raises(PriorityQueueEmptyError):
        q.extract_min()
    with pytest.raises(PriorityQueueEmptyError):
        q.decrease_key(0, 1)


def test_full_error(queue):
    with pytest.raises(PriorityQueueFullError):
        queue.insert(0)


def test_zero_capacity():
    with pytest.raises(PriorityQueueFullError):
        MinPriorityQueue(0).insert(1)


def test_negative_capacity():
    with pytest.raises(ValueError):
        MinPriorityQueue(-1)


def test_decrease_key_moves_to_top(queue):
    last = len(queue) - 1
    queue.decrease_key(last, -5)
    assert queue.minimum() == -5
    assert_heap(queue)


def test_decrease_key_rejects_increase(queue):
    before = list(queue)
    with pytest.raises(ValueError):
        queue.decrease_key(0, before[0] + 1)
    assert list(queue) == before


@pytest.mark.parametrize("index", [-1, len(VALUES)])
def test_decrease_key_bad_index(queue, index):
    with pytest.raises(IndexError):
        queue.decrease_key(index, -100)


def test_interleaved_operations_keep_heap():
    q = MinPriorityQueue(5)
    for v in (5, 3, 8):
        q.insert(v)
    assert q.extract_min() == 3
    q.insert(1)
    q.insert(6)
    assert_heap(q)
    assert [q.extract_min() for _ in range(len(q))] == [1, 5, 6, 8]