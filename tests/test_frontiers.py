from statesearch.core.frontiers import FIFOQueue, LIFOStack, PriorityQueue


def test_stack_pops_most_recent_first():
    s = LIFOStack()
    for x in (1, 2, 3):
        s.push(x)
    assert s.peek() == 3
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]
    assert not s


def test_queue_pops_oldest_first():
    q = FIFOQueue()
    for x in (1, 2, 3):
        q.push(x)
    assert q.peek() == 1
    assert [q.pop(), q.pop(), q.pop()] == [1, 2, 3]
    assert len(q) == 0


def test_priority_queue_orders_by_key():
    pq = PriorityQueue(key=lambda x: x)
    for x in (5, 1, 4, 2):
        pq.push(x)
    assert [pq.pop() for _ in range(4)] == [1, 2, 4, 5]


def test_priority_queue_ties_break_by_insertion_order():
    # dicts are not orderable, so this also checks items are never compared
    pq = PriorityQueue(key=lambda item: item["f"])
    items = [{"f": 2, "id": "a"}, {"f": 1, "id": "b"}, {"f": 2, "id": "c"}, {"f": 1, "id": "d"}]
    for item in items:
        pq.push(item)
    assert [pq.pop()["id"] for _ in range(4)] == ["b", "d", "a", "c"]
