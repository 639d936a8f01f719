from __future__ import annotations

from hypothesis import given, settings, strategies as st

from adjgraph import FifoQueue, PriorityQueue


def test_empty_queue_returns_none():
    pq = PriorityQueue(lambda a, b: a < b)
    assert pq.is_empty()
    assert len(pq) == 0
    assert pq.pop() is None
    assert pq.peek() is None
    assert not pq


def test_peek_does_not_remove():
    pq = PriorityQueue(lambda a, b: a < b, [4, 2, 9])
    assert pq.peek() == 2
    assert len(pq) == 3
    assert pq.pop() == 2
    assert pq.peek() == 4


def test_max_heap_comparator():
    pq = PriorityQueue(lambda a, b: a > b)
    for v in [3, 1, 4, 1, 5, 9, 2, 6]:
        pq.push(v)
    assert list(pq.drain()) == [9, 6, 5, 4, 3, 2, 1, 1]
    assert pq.is_empty()


def test_min_by_and_max_by_use_key():
    items = [("c", 3), ("a", 1), ("b", 2)]
    assert [v for v, _ in PriorityQueue.min_by(lambda e: e[1], items).drain()] == ["a", "b", "c"]
    assert [v for v, _ in PriorityQueue.max_by(lambda e: e[1], items).drain()] == ["c", "b", "a"]


def test_duplicate_payloads_coexist():
    pq = PriorityQueue.min_by(lambda e: e[1])
    pq.push((3, 10))
    pq.push((3, 4))
    pq.push((3, 7))
    assert [pq.pop() for _ in range(3)] == [(3, 4), (3, 7), (3, 10)]


def test_sift_down_takes_child_ranked_ahead_of_sibling():
    # both children beat the root; the right one also beats the left one
    pq = PriorityQueue(lambda a, b: a[0] < b[0], [(5, "root"), (1, "left"), (0, "right")])
    assert pq.peek() == (0, "right")
    assert pq._check_invariant()


def test_heapify_is_linear():
    calls = 0

    def before(a: int, b: int) -> bool:
        nonlocal calls
        calls += 1
        return a < b

    n = 2048
    pq = PriorityQueue(before, range(n, 0, -1))
    assert calls <= 3 * n
    assert pq._check_invariant()


def test_heapify_replaces_contents():
    pq = PriorityQueue(lambda a, b: a < b, [7, 8])
    pq.heapify([3, 2, 1])
    assert list(pq.drain()) == [1, 2, 3]


@settings(max_examples=100)
@given(values=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_pops_come_out_in_comparator_order(values):
    ascending = PriorityQueue(lambda a, b: a < b)
    for v in values:
        ascending.push(v)
        assert ascending._check_invariant()
    assert [ascending.pop() for _ in range(len(values))] == sorted(values)
    assert ascending.pop() is None

    descending = PriorityQueue(lambda a, b: a > b, values)
    assert list(descending.drain()) == sorted(values, reverse=True)


@settings(max_examples=100)
@given(
    pairs=st.lists(
        st.tuples(st.integers(min_value=0, max_value=5), st.integers()), max_size=40
    )
)
def test_key_comparator_with_ties(pairs):
    pq = PriorityQueue.min_by(lambda e: e[0], pairs)
    keys = [e[0] for e in pq.drain()]
    assert keys == sorted(p[0] for p in pairs)


def test_fifo_queue_order():
    q = FifoQueue()
    assert q.is_empty()
    assert q.dequeue() is None
    assert q.front() is None
    for v in [5, 1, 3]:
        q.enqueue(v)
    assert len(q) == 3
    assert q.front() == 5
    assert [q.dequeue(), q.dequeue()] == [5, 1]
    q.enqueue(9)
    assert [q.dequeue(), q.dequeue(), q.dequeue()] == [3, 9, None]
    assert not q


def test_fifo_queue_initial_items():
    q = FifoQueue(range(3))
    assert q.front() == 0
    assert len(q) == 3
