from rrsim import RoundRobinSimulator, make_processes
from rrsim.charts import assign_colors, export_pdf_report, render_gantt, save_gantt_png
from rrsim.report import compute_metrics


def run(pairs, quantum=2, max_seq_len=10):
    procs = make_processes(pairs)
    result = RoundRobinSimulator(quantum, max_seq_len, record_segments=True).run(procs)
    return procs, result


def test_colors_per_process():
    procs = make_processes([(0, 1)] * 12)
    colors = assign_colors(procs)
    assert set(colors) == {str(i) for i in range(12)}
    assert colors["0"] == colors["10"]


def test_gantt_axes():
    procs, result = run([(1, 3), (2, 2)])
    fig = render_gantt(procs, result.segments, "RR")
    ax = fig.axes[0]
    assert ax.get_title() == "RR"
    assert list(ax.get_yticks()) == [0, 1]
    # one bar per RUN segment
    assert len(ax.patches) >= sum(1 for s in result.segments if s.kind == "RUN")


def test_save_png(tmp_path):
    procs, result = run([(0, 40), (0, 40)], quantum=1, max_seq_len=2)
    path = tmp_path / "gantt.png"
    save_gantt_png(str(path), procs, result.segments)
    assert path.read_bytes()[:4] == b"\x89PNG"


def test_pdf_report(tmp_path):
    procs, result = run([(0, 3), (5, 2)])
    png = tmp_path / "g.png"
    save_gantt_png(str(png), procs, result.segments)
    pdf = tmp_path / "report.pdf"
    export_pdf_report(str(pdf), 2, 10, procs, result.sequence, compute_metrics(procs), str(png))
    assert pdf.read_bytes()[:5] == b"%PDF-"


def test_pdf_report_without_chart(tmp_path):
    procs, result = run([(0, 3)])
    pdf = tmp_path / "report.pdf"
    export_pdf_report(str(pdf), 2, 10, procs, result.sequence, compute_metrics(procs))
    assert pdf.exists()
