import pytest

from rrsim import make_processes, simulate_rr
from rrsim.models import IDLE
from rrsim.report import compute_metrics, format_metrics, format_process_table, format_sequence


def test_format_sequence():
    assert format_sequence([IDLE, 0, 2]) == "[-1,0,2]"
    assert format_sequence([]) == "[]"


def test_process_table_rows():
    procs = make_processes([(0, 3), (1, 4)])
    simulate_rr(100, 10, procs)
    lines = format_process_table(procs, indent=2).splitlines()
    assert len(lines) == 6
    assert all(line.startswith("  ") for line in lines)
    assert lines[1].split("|")[1].strip() == "Id"
    cells = [c.strip() for c in lines[4].split("|")[1:-1]]
    assert cells == ["1", "1", "4", "3", "7"]


def test_process_table_shows_unset_timestamps():
    procs = make_processes([(0, 3)])
    row = format_process_table(procs).splitlines()[3]
    assert [c.strip() for c in row.split("|")[1:-1]] == ["0", "0", "3", "-1", "-1"]


def test_metrics():
    procs = make_processes([(0, 3), (1, 4), (10, 2)])
    simulate_rr(100, 10, procs)
    m = compute_metrics(procs)
    assert m["TT"] == {0: 3, 1: 6, 2: 2}
    assert m["WT"] == {0: 0, 1: 2, 2: 0}
    assert m["RT"] == {0: 0, 1: 2, 2: 0}
    assert m["avg_TT"] == pytest.approx(11 / 3)
    assert m["total_time"] == 12
    assert m["busy_time"] == 9
    assert m["idle_time"] == 3
    assert m["cpu_util"] == pytest.approx(75.0)
    assert m["throughput"] == pytest.approx(0.25)


def test_metrics_before_run_and_empty():
    m = compute_metrics(make_processes([(0, 3)]))
    assert m["TT"] == {0: 0}
    assert m["total_time"] == 0
    assert m["cpu_util"] == 0.0
    assert compute_metrics([])["avg_WT"] == 0.0


def test_format_metrics():
    procs = make_processes([(0, 2)])
    simulate_rr(1, 5, procs)
    text = format_metrics(compute_metrics(procs))
    assert "CPU Utilization        : 100.00%" in text
