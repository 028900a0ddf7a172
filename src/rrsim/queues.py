from collections import deque
from typing import Callable, Deque, Iterator, List, Optional

from .models import Process


# --------------------------
#  Ready queue
# --------------------------
class ReadyQueue:
    """FIFO of process ids eligible to run now."""

    def __init__(self):
        self._q: Deque[int] = deque()

    def peek(self) -> int:
        return self._q[0]

    def pop(self) -> int:
        return self._q.popleft()

    def push(self, pid: int):
        self._q.append(pid)

    def __len__(self):
        return len(self._q)

    def __bool__(self):
        return bool(self._q)

    def __iter__(self) -> Iterator[int]:
        return iter(self._q)

    def __repr__(self):
        return f"ReadyQueue({list(self._q)})"


# --------------------------
#  Arrival feed (job queue)
# --------------------------
class ArrivalFeed:
    """Processes not yet arrived, ordered by (arrival, id).

    The three ``admit_*`` methods differ only in which arrivals they accept
    at time ``now``; together they give RR its tie-break at a quantum
    boundary: strictly earlier arrivals are queued ahead of the preempted
    process, arrivals exactly at the boundary behind it.
    """

    def __init__(self, processes: List[Process]):
        self._arrival = {p.id: p.arrival for p in processes}
        self._pending: Deque[int] = deque(
            p.id for p in sorted(processes, key=lambda p: (p.arrival, p.id))
        )

    def next_arrival(self) -> Optional[int]:
        if not self._pending:
            return None
        return self._arrival[self._pending[0]]

    def _admit(self, ready: ReadyQueue, accept: Callable[[int], bool]) -> List[int]:
        added = []
        while self._pending and accept(self._arrival[self._pending[0]]):
            pid = self._pending.popleft()
            ready.push(pid)
            added.append(pid)
        return added

    def admit_until(self, now: int, ready: ReadyQueue) -> List[int]:
        return self._admit(ready, lambda a: a <= now)

    def admit_before(self, now: int, ready: ReadyQueue) -> List[int]:
        return self._admit(ready, lambda a: a < now)

    def admit_at(self, now: int, ready: ReadyQueue) -> List[int]:
        return self._admit(ready, lambda a: a == now)

    def __len__(self):
        return len(self._pending)

    def __bool__(self):
        return bool(self._pending)
