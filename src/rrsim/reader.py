import csv
import sys
from typing import Iterable, List, Optional, TextIO

from .errors import InputError
from .models import Process

CSV_FIELDS = ["Id", "Arrival", "Burst", "Start", "Finish"]


def _parse_int(tok: str, what: str, line_no: Optional[int]) -> int:
    try:
        value = int(tok)
    except (TypeError, ValueError):
        raise InputError(f"{what} is not an integer: {tok!r}", line_no) from None
    if value < 0:
        raise InputError(f"{what} must be >= 0, got {value}", line_no)
    return value


def parse_processes(lines: Iterable[str]) -> List[Process]:
    """Parse ``arrival burst`` lines; blank lines are skipped, ids follow input order."""
    procs: List[Process] = []
    for line_no, line in enumerate(lines, start=1):
        toks = line.split()
        if not toks:
            continue
        if len(toks) != 2:
            raise InputError("need 2 ints per line", line_no)
        arrival = _parse_int(toks[0], "arrival", line_no)
        burst = _parse_int(toks[1], "burst", line_no)
        procs.append(Process(id=len(procs), arrival=arrival, burst=burst))
    return procs


def read_processes(stream: Optional[TextIO] = None) -> List[Process]:
    return parse_processes(stream if stream is not None else sys.stdin)


# --------------------------
#  CSV import / export
# --------------------------
def read_csv(path: str) -> List[Process]:
    procs: List[Process] = []
    with open(path, "r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if not reader.fieldnames or not {"Arrival", "Burst"} <= set(reader.fieldnames):
            raise InputError("CSV needs 'Arrival' and 'Burst' columns", 1)
        for row in reader:
            line_no = reader.line_num
            arrival = _parse_int(row.get("Arrival"), "arrival", line_no)
            burst = _parse_int(row.get("Burst"), "burst", line_no)
            procs.append(Process(id=len(procs), arrival=arrival, burst=burst))
    return procs


def write_csv(path: str, processes: List[Process]):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(CSV_FIELDS)
        for p in processes:
            w.writerow([p.id, p.arrival, p.burst, p.start_time, p.finish_time])
