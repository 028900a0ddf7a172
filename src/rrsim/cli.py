"""Command-line entry point: ``rrsim QUANTUM MAX_SEQ_LEN < processes.txt``."""

import argparse
import logging
import os
import sys
import time
from typing import List, Optional

from .errors import InputError
from .reader import read_processes
from .report import compute_metrics, format_metrics, format_process_table, format_sequence
from .simulator import RoundRobinSimulator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rrsim",
        description="Simulate Round-Robin CPU scheduling over 'arrival burst' lines read from stdin.",
    )
    parser.add_argument("quantum", type=int, help="time slice")
    parser.add_argument("max_seq_len", type=int, help="maximum length of the reported execution sequence")
    parser.add_argument("-i", "--input", metavar="FILE", help="read processes from FILE instead of stdin")
    parser.add_argument("--no-fast-forward", dest="fast_forward", action="store_false",
                        help="run one quantum per iteration")
    parser.add_argument("--timeline", action="store_true", help="print the decision timeline")
    parser.add_argument("--gantt", metavar="PNG", help="save a Gantt chart")
    parser.add_argument("--pdf", metavar="PDF", help="save a PDF report")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.quantum <= 0:
        parser.error(f"quantum must be > 0, got {args.quantum}")
    if args.max_seq_len <= 0:
        parser.error(f"max_seq_len must be > 0, got {args.max_seq_len}")

    charts = args.gantt or args.pdf
    sim = RoundRobinSimulator(
        args.quantum, args.max_seq_len,
        fast_forward=args.fast_forward,
        trace_decisions=args.timeline,
        record_segments=bool(charts),
    )

    try:
        if args.input:
            print(f"Reading in lines from {args.input}...")
            with open(args.input, "r", encoding="utf-8") as f:
                processes = read_processes(f)
        else:
            print("Reading in lines from stdin...")
            processes = read_processes(sys.stdin)
    except InputError as e:
        print(e)
        return 1
    except OSError as e:
        print(f"Could not read input: {e}")
        return 1

    print(f"Running simulate_rr(q={args.quantum},maxs={args.max_seq_len},procs=[{len(processes)}])")
    t0 = time.perf_counter()
    result = sim.run(processes)
    print(f"Elapsed time  : {time.perf_counter() - t0:.4f}s\n")

    if args.timeline:
        print("\n".join(result.log))
        print()
    print(f"seq = {format_sequence(result.sequence)}")
    print(format_process_table(processes))
    metrics = compute_metrics(processes)
    print(format_metrics(metrics))

    if charts:
        from .charts import export_pdf_report, save_gantt_png

        gantt_path = args.gantt
        if args.gantt:
            save_gantt_png(args.gantt, processes, result.segments)
            logger.info("saved Gantt chart to %s", args.gantt)
        if args.pdf:
            tmp_png = None
            if not gantt_path:
                tmp_png = args.pdf + ".gantt.png"
                gantt_path = save_gantt_png(tmp_png, processes, result.segments, dpi=240)
            try:
                export_pdf_report(args.pdf, args.quantum, args.max_seq_len, processes,
                                  result.sequence, metrics, gantt_path)
            finally:
                if tmp_png:
                    os.remove(tmp_png)
            logger.info("saved PDF report to %s", args.pdf)
    return 0


if __name__ == "__main__":
    sys.exit(main())
