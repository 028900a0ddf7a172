from dataclasses import dataclass, field
from typing import List, Optional

# Sequence marker for "CPU idle"; every other entry is a Process.id
IDLE = -1
UNSET = -1


# --------------------------
#  Data models
# --------------------------
@dataclass
class Process:
    id: int
    arrival: int
    burst: int
    start_time: int = UNSET
    finish_time: int = UNSET

    @property
    def started(self) -> bool:
        return self.start_time != UNSET

    @property
    def finished(self) -> bool:
        return self.finish_time != UNSET

    @property
    def turnaround(self) -> Optional[int]:
        if not self.finished:
            return None
        return self.finish_time - self.arrival

    @property
    def waiting(self) -> Optional[int]:
        tt = self.turnaround
        return None if tt is None else tt - self.burst

    @property
    def response(self) -> Optional[int]:
        if not self.started:
            return None
        return self.start_time - self.arrival


@dataclass
class Segment:
    label: str
    start: int
    end: int
    kind: str           # RUN | IDLE | SKIP

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass
class SimulationResult:
    sequence: List[int]
    end_time: int = 0
    log: List[str] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)
    fast_forwards: int = 0


def make_processes(pairs) -> List[Process]:
    """Build Process records from ``(arrival, burst)`` pairs, ids by position."""
    return [Process(id=i, arrival=a, burst=b) for i, (a, b) in enumerate(pairs)]
