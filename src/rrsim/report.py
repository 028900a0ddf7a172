from typing import Dict, List, Sequence

from .models import Process

TABLE_COLUMNS = ["Id", "Arrival", "Burst", "Start", "Finish"]
NUM_WIDTH = 20


def format_sequence(seq: Sequence[int]) -> str:
    return "[" + ",".join(str(x) for x in seq) + "]"


def format_process_table(processes: List[Process], indent: int = 0) -> str:
    inds = " " * indent
    id_w = max(2, max((len(str(p.id)) for p in processes), default=2))
    widths = [id_w] + [NUM_WIDTH] * 4
    rule = inds + "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    header = inds + "| " + " | ".join(name.rjust(w) for name, w in zip(TABLE_COLUMNS, widths)) + " |"

    lines = [rule, header, rule]
    for p in processes:
        vals = [p.id, p.arrival, p.burst, p.start_time, p.finish_time]
        lines.append(inds + "| " + " | ".join(str(v).rjust(w) for v, w in zip(vals, widths)) + " |")
    lines.append(rule)
    return "\n".join(lines)


def compute_metrics(processes: List[Process]) -> Dict:
    """Turnaround/waiting/response per process plus run-wide aggregates.

    Unfinished processes count as zero, like the visualizer's metrics panel.
    """
    TT = {p.id: p.turnaround or 0 for p in processes}
    WT = {p.id: p.waiting or 0 for p in processes}
    RT = {p.id: p.response or 0 for p in processes}

    def avg(d):
        vals = list(d.values())
        return sum(vals) / len(vals) if vals else 0.0

    total_time = max((p.finish_time for p in processes), default=0)
    total_time = max(0, total_time)
    busy_time = sum(p.burst for p in processes)
    return {
        "WT": WT, "TT": TT, "RT": RT,
        "avg_WT": avg(WT), "avg_TT": avg(TT), "avg_RT": avg(RT),
        "total_time": total_time,
        "busy_time": busy_time,
        "idle_time": max(0, total_time - busy_time),
        "cpu_util": (busy_time / total_time) * 100.0 if total_time > 0 else 0.0,
        "throughput": (len(processes) / total_time) if total_time > 0 else 0.0,
    }


def format_metrics(metrics: Dict) -> str:
    return "\n".join([
        f"Average Waiting Time   : {metrics['avg_WT']:.2f}",
        f"Average Turnaround Time: {metrics['avg_TT']:.2f}",
        f"Average Response Time  : {metrics['avg_RT']:.2f}",
        f"CPU Utilization        : {metrics['cpu_util']:.2f}%",
        f"Throughput             : {metrics['throughput']:.4f} / time unit",
    ])
