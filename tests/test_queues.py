from rrsim import make_processes
from rrsim.queues import ArrivalFeed, ReadyQueue


class TestReadyQueue:
    def test_fifo_order(self):
        rq = ReadyQueue()
        for pid in (2, 0, 1):
            rq.push(pid)
        assert rq.peek() == 2
        assert [rq.pop(), rq.pop(), rq.pop()] == [2, 0, 1]
        assert not rq
        assert len(rq) == 0

    def test_iteration_does_not_consume(self):
        rq = ReadyQueue()
        rq.push(5)
        rq.push(6)
        assert list(rq) == [5, 6]
        assert len(rq) == 2


class TestArrivalFeed:
    def test_orders_by_arrival_then_id(self):
        procs = make_processes([(4, 1), (1, 1), (4, 1), (0, 1)])
        feed = ArrivalFeed(procs)
        rq = ReadyQueue()
        assert feed.next_arrival() == 0
        assert feed.admit_until(10, rq) == [3, 1, 0, 2]
        assert feed.next_arrival() is None
        assert not feed

    def test_admission_rules_at_boundary(self):
        procs = make_processes([(1, 1), (3, 1), (3, 1), (5, 1)])
        feed = ArrivalFeed(procs)
        rq = ReadyQueue()
        assert feed.admit_before(3, rq) == [0]
        assert feed.admit_before(3, rq) == []
        assert feed.admit_at(3, rq) == [1, 2]
        assert feed.admit_at(4, rq) == []
        assert feed.admit_until(5, rq) == [3]
        assert list(rq) == [0, 1, 2, 3]

    def test_admit_at_stops_at_first_mismatch(self):
        feed = ArrivalFeed(make_processes([(2, 1), (3, 1)]))
        rq = ReadyQueue()
        assert feed.admit_at(3, rq) == []
        assert len(feed) == 2
