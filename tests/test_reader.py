import io

import pytest

from rrsim.errors import InputError
from rrsim.models import Process
from rrsim.reader import parse_processes, read_csv, read_processes, write_csv


def test_parses_pairs_and_assigns_ids_by_order():
    procs = parse_processes(["0 3\n", "\n", "  5   2 \n", "1 0"])
    assert procs == [
        Process(id=0, arrival=0, burst=3),
        Process(id=1, arrival=5, burst=2),
        Process(id=2, arrival=1, burst=0),
    ]


def test_reads_from_stream():
    procs = read_processes(io.StringIO("1 2\n3 4\n"))
    assert [(p.arrival, p.burst) for p in procs] == [(1, 2), (3, 4)]


@pytest.mark.parametrize("text, line_no, reason", [
    ("0 1\n1 2 3\n", 2, "need 2 ints per line"),
    ("7\n", 1, "need 2 ints per line"),
    ("0 1\n\nx 2\n", 3, "arrival is not an integer"),
    ("0 1.5\n", 1, "burst is not an integer"),
    ("-1 4\n", 1, "arrival must be >= 0"),
    ("0 -4\n", 1, "burst must be >= 0"),
])
def test_reports_bad_line(text, line_no, reason):
    with pytest.raises(InputError) as exc:
        read_processes(io.StringIO(text))
    assert exc.value.line_no == line_no
    assert str(exc.value).startswith(f"Error on line {line_no}: {reason}")


def test_csv_round_trip_keeps_timestamps(tmp_path):
    path = tmp_path / "procs.csv"
    procs = [Process(id=0, arrival=0, burst=3, start_time=0, finish_time=3)]
    write_csv(str(path), procs)
    assert path.read_text(encoding="utf-8").splitlines()[0] == "Id,Arrival,Burst,Start,Finish"
    loaded = read_csv(str(path))
    assert loaded == [Process(id=0, arrival=0, burst=3)]


def test_csv_with_visualizer_columns(tmp_path):
    path = tmp_path / "procs.csv"
    path.write_text("PID,Arrival,Burst,MLQ\nP1,0,5,1\nP2,2,3,1\n", encoding="utf-8")
    procs = read_csv(str(path))
    assert [(p.id, p.arrival, p.burst) for p in procs] == [(0, 0, 5), (1, 2, 3)]


def test_csv_missing_columns(tmp_path):
    path = tmp_path / "procs.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")
    with pytest.raises(InputError, match="Arrival"):
        read_csv(str(path))


def test_csv_bad_value_reports_line(tmp_path):
    path = tmp_path / "procs.csv"
    path.write_text("Arrival,Burst\n0,1\n2,oops\n", encoding="utf-8")
    with pytest.raises(InputError) as exc:
        read_csv(str(path))
    assert exc.value.line_no == 3
