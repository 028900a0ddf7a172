"""Round-Robin simulation engine.

The run is a pure function of (quantum, max_seq_len, processes): it fills
in each process's start/finish time and returns the compressed execution
sequence. One ``SimulationState`` holds everything that changes during a
run and is threaded through each step.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import SimulationConfig
from .errors import InputError
from .fastforward import ReadySlot, plan_fast_forward
from .models import UNSET, Process, Segment, SimulationResult
from .queues import ArrivalFeed, ReadyQueue
from .sequence import SequenceRecorder

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    processes: List[Process]
    remaining: List[int]
    jobs: ArrivalFeed
    ready: ReadyQueue
    seq: SequenceRecorder
    time: int = 0
    log: Optional[List[str]] = None
    segments: Optional[List[Segment]] = None
    fast_forwards: int = 0

    @classmethod
    def start(cls, processes: List[Process], config: SimulationConfig) -> "SimulationState":
        for p in processes:
            p.start_time = UNSET
            p.finish_time = UNSET
        return cls(
            processes=processes,
            remaining=[p.burst for p in processes],
            jobs=ArrivalFeed(processes),
            ready=ReadyQueue(),
            seq=SequenceRecorder(config.max_seq_len),
            log=[] if config.trace_decisions else None,
            segments=[] if config.record_segments else None,
        )


# --------------------------
#  Scheduler
# --------------------------
class RoundRobinSimulator:
    def __init__(self, quantum: int, max_seq_len: int, fast_forward: bool = True,
                 trace_decisions: bool = False, record_segments: bool = False):
        self.config = SimulationConfig(
            quantum=quantum,
            max_seq_len=max_seq_len,
            fast_forward=fast_forward,
            trace_decisions=trace_decisions,
            record_segments=record_segments,
        ).validate()

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "RoundRobinSimulator":
        return cls(config.quantum, config.max_seq_len, config.fast_forward,
                   config.trace_decisions, config.record_segments)

    @property
    def quantum(self) -> int:
        return self.config.quantum

    def run(self, processes: List[Process]) -> SimulationResult:
        check_processes(processes)
        st = SimulationState.start(processes, self.config)
        while self.step(st):
            pass
        logger.info("simulated %d processes (q=%d): end time %d, %d sequence entries, %d fast-forwards",
                    len(processes), self.quantum, st.time, len(st.seq), st.fast_forwards)
        return SimulationResult(
            sequence=st.seq.entries,
            end_time=st.time,
            log=st.log if st.log is not None else [],
            segments=st.segments if st.segments is not None else [],
            fast_forwards=st.fast_forwards,
        )

    def step(self, st: SimulationState) -> bool:
        """Advance one loop iteration; False once the simulation is over."""
        if not st.ready and not st.jobs:
            return False
        if not st.ready:
            self._wait_for_arrival(st)
            return True
        return self._run_quantum(st)

    # -------- helpers --------
    def _note(self, st: SimulationState, msg: str, *args):
        if st.log is not None:
            st.log.append(f"t={st.time} → " + (msg % args if args else msg))

    def _run(self, st: SimulationState, pid: int, amount: int):
        if st.segments is not None and amount > 0:
            st.segments.append(Segment(str(pid), st.time, st.time + amount, "RUN"))
        st.time += amount

    def _note_arrivals(self, st: SimulationState, added: List[int]):
        if added:
            self._note(st, "Arrival: +%s | ReadyQueue=%s", added, list(st.ready))

    def _wait_for_arrival(self, st: SimulationState):
        arrival = st.jobs.next_arrival()
        if st.time < arrival:
            st.seq.idle()
            if st.segments is not None:
                st.segments.append(Segment("IDLE", st.time, arrival, "IDLE"))
            self._note(st, "IDLE until arrival at %d", arrival)
        st.time = arrival
        self._note_arrivals(st, st.jobs.admit_until(st.time, st.ready))

    def _run_quantum(self, st: SimulationState) -> bool:
        q = self.quantum
        pid = st.ready.pop()
        proc = st.processes[pid]
        st.seq.append(pid)
        if not proc.started:
            proc.start_time = st.time
        self._note(st, "Pick %d (head of ReadyQueue).", pid)

        rem = st.remaining[pid]
        if rem <= q:
            self._run(st, pid, rem)
            st.remaining[pid] = 0
            proc.finish_time = st.time
            self._note(st, "Finish %d", pid)
            self._note_arrivals(st, st.jobs.admit_until(st.time, st.ready))
            return True

        self._run(st, pid, q)
        st.remaining[pid] = rem - q
        self._note_arrivals(st, st.jobs.admit_before(st.time, st.ready))
        st.ready.push(pid)
        self._note(st, "Requeue %d (remaining %d) | ReadyQueue=%s", pid, rem - q, list(st.ready))
        self._note_arrivals(st, st.jobs.admit_at(st.time, st.ready))

        if len(st.ready) == 1 and not st.jobs:
            self._run_to_completion(st)
            return False
        if self.config.fast_forward:
            self._fast_forward(st)
        return True

    def _run_to_completion(self, st: SimulationState):
        pid = st.ready.pop()
        st.seq.append(pid)
        self._note(st, "Run %d alone to completion (remaining %d)", pid, st.remaining[pid])
        self._run(st, pid, st.remaining[pid])
        st.remaining[pid] = 0
        st.processes[pid].finish_time = st.time
        self._note(st, "Finish %d", pid)

    def _fast_forward(self, st: SimulationState):
        # several ready processes can only be skipped once nothing more is recorded
        if len(st.ready) > 1 and not st.seq.full:
            return
        snapshot = [ReadySlot(pid, st.remaining[pid], st.processes[pid].started) for pid in st.ready]
        plan = plan_fast_forward(snapshot, st.jobs.next_arrival(), self.quantum, st.time, st.seq.full)
        if plan is None:
            return

        start = st.time
        if len(plan.affected) == 1:
            pid = plan.affected[0]
            st.seq.append(pid)
            self._run(st, pid, plan.per_process)
        else:
            if st.segments is not None:
                st.segments.append(Segment("SKIP", start, start + plan.duration, "SKIP"))
            st.time += plan.duration
        for pid in plan.affected:
            st.remaining[pid] -= plan.per_process

        st.fast_forwards += 1
        logger.debug("fast-forward %d rounds of %s: t=%d -> %d", plan.rounds, list(plan.affected), start, st.time)
        self._note(st, "Fast-forward %d rounds of %s (from t=%d)", plan.rounds, list(plan.affected), start)


def check_processes(processes: List[Process]):
    for i, p in enumerate(processes):
        if p.id != i:
            raise InputError(f"process at position {i} has id {p.id}")
        if p.arrival < 0:
            raise InputError(f"process {i} has negative arrival {p.arrival}")
        if p.burst < 0:
            raise InputError(f"process {i} has negative burst {p.burst}")


def simulate_rr(quantum: int, max_seq_len: int, processes: List[Process],
                fast_forward: bool = True) -> List[int]:
    """Simulate RR in place on ``processes`` and return the execution sequence."""
    return RoundRobinSimulator(quantum, max_seq_len, fast_forward=fast_forward).run(processes).sequence
