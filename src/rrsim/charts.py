"""Gantt rendering (matplotlib) and PDF reports (reportlab)."""

import math
import os
from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib.colors as mcolors
import matplotlib.patches as mpatches
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.ticker import MaxNLocator

from .models import Process, Segment
from .report import format_sequence

IDLE_COLOR = (0.60, 0.60, 0.60)
SKIP_COLOR = (1.0, 0.65, 0.15)


def assign_colors(processes: List[Process]) -> Dict[str, Tuple[float, float, float]]:
    colors = list(mcolors.TABLEAU_COLORS.values())
    return {str(p.id): mcolors.to_rgb(colors[i % len(colors)]) for i, p in enumerate(processes)}


# --------------------------
#  Gantt chart
# --------------------------
def draw_gantt(ax, processes: List[Process], segments: List[Segment], title: str,
               pid_colors: Optional[Dict[str, Tuple[float, float, float]]] = None,
               show_arrival_markers: bool = True):
    ax.clear()
    pid_colors = pid_colors or assign_colors(processes)
    y_order = [str(p.id) for p in processes]
    y_index = {pid: i for i, pid in enumerate(y_order)}
    bar_h = 0.70

    total_end = 0
    for s in segments:
        total_end = max(total_end, s.end)
        if s.kind == "IDLE":
            ax.axvspan(s.start, s.end, facecolor=IDLE_COLOR, alpha=0.12, edgecolor=None, zorder=0)
        elif s.kind == "SKIP":
            # slices inside a collapsed span are not materialized
            ax.axvspan(s.start, s.end, facecolor=SKIP_COLOR, alpha=0.15, hatch="//",
                       edgecolor=SKIP_COLOR, zorder=0)
        elif s.kind == "RUN" and s.label in y_index:
            y = y_index[s.label]
            ax.barh(
                y, s.duration, left=s.start, height=bar_h,
                color=pid_colors.get(s.label, (0.2, 0.5, 0.9)), edgecolor="black",
                linewidth=0.8, zorder=3
            )
            ax.text(
                s.start + s.duration / 2.0, y, s.label,
                ha="center", va="center", color="white",
                fontsize=9, fontweight="bold", zorder=4
            )

    if show_arrival_markers:
        for p in processes:
            ax.plot([p.arrival], [y_index[str(p.id)]], marker="v", markersize=6, color="black", zorder=7)

    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_xlabel("Time")
    ax.set_ylabel("Process")
    ax.set_yticks(list(range(len(y_order))))
    ax.set_yticklabels(y_order)

    end = max(1, total_end)
    ax.set_xlim(0, math.ceil(end * 1.0001))
    ax.xaxis.set_major_locator(MaxNLocator(nbins=20, integer=True))
    ax.grid(True, axis="x", which="major", linestyle="--", alpha=0.35)
    ax.set_ylim(-0.8, max(1, len(y_order)) - 0.2)

    handles = [
        mpatches.Patch(color=IDLE_COLOR, alpha=0.12, label="IDLE"),
        mpatches.Patch(facecolor=SKIP_COLOR, alpha=0.15, hatch="//", label="Fast-forward"),
        Line2D([0], [0], marker="v", linestyle="None", markersize=6, color="black", label="Arrival"),
    ]
    ax.legend(handles=handles, loc="lower right", framealpha=0.75, fontsize=8)


def render_gantt(processes: List[Process], segments: List[Segment], title: str = "Round Robin") -> Figure:
    fig = Figure(figsize=(9, 5), dpi=100)
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(111)
    draw_gantt(ax, processes, segments, title)
    fig.tight_layout()
    return fig


def save_gantt_png(path: str, processes: List[Process], segments: List[Segment],
                   title: str = "Round Robin", dpi: int = 160) -> str:
    fig = render_gantt(processes, segments, title)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    return path


# --------------------------
#  PDF Report (ReportLab)
# --------------------------
def export_pdf_report(path: str, quantum: int, max_seq_len: int, processes: List[Process],
                      sequence: Sequence[int], metrics: Dict, gantt_png_path: Optional[str] = None):
    from reportlab.lib import colors
    from reportlab.lib.pagesizes import A4, landscape
    from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
    from reportlab.lib.units import cm
    from reportlab.platypus import (
        BaseDocTemplate, Frame, Image, NextPageTemplate, PageBreak,
        PageTemplate, Paragraph, Spacer, Table, TableStyle
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle("t", parent=styles["Title"], fontSize=18, leading=22, spaceAfter=8)
    h_style = ParagraphStyle("h", parent=styles["Heading2"], fontSize=13, leading=16, spaceBefore=10, spaceAfter=6)
    body_style = ParagraphStyle("b", parent=styles["BodyText"], fontSize=10.5, leading=13)
    mono_style = ParagraphStyle("m", parent=body_style, fontName="Courier", fontSize=9, leading=11)

    portrait_pagesize = A4
    landscape_pagesize = landscape(A4)
    margin = 1.2 * cm

    portrait_frame = Frame(margin, margin, portrait_pagesize[0] - 2 * margin,
                           portrait_pagesize[1] - 2 * margin, id="portrait_frame")
    landscape_frame = Frame(margin, margin, landscape_pagesize[0] - 2 * margin,
                            landscape_pagesize[1] - 2 * margin, id="landscape_frame")

    def on_page(canvas, doc):
        canvas.saveState()
        canvas.setFont("Helvetica", 9)
        canvas.setFillColor(colors.HexColor("#666666"))
        w, h = canvas._pagesize
        canvas.drawRightString(w - margin, 0.85 * cm, f"RR Simulator  •  Page {doc.page}")
        canvas.restoreState()

    doc = BaseDocTemplate(path, pagesize=portrait_pagesize)
    doc.addPageTemplates([
        PageTemplate(id="PORT", frames=[portrait_frame], pagesize=portrait_pagesize, onPage=on_page),
        PageTemplate(id="LAND", frames=[landscape_frame], pagesize=landscape_pagesize, onPage=on_page),
    ])

    table_style = TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#e9edf5")),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.4, colors.HexColor("#c7cfdd")),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f7f9fc")]),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ])

    elems = []
    elems.append(Paragraph("Round-Robin Simulation Report", title_style))
    elems.append(Paragraph(f"<b>Quantum:</b> {quantum} &nbsp; <b>Max sequence length:</b> {max_seq_len}", body_style))
    elems.append(Spacer(1, 8))

    summary_data = [
        ["Metric", "Value"],
        ["CPU Utilization", f"{metrics.get('cpu_util', 0):.2f}%"],
        ["Throughput", f"{metrics.get('throughput', 0):.4f} / time unit"],
        ["Total Time", f"{metrics.get('total_time', 0)}"],
        ["Idle Time", f"{metrics.get('idle_time', 0)}"],
        ["Avg Waiting Time", f"{metrics.get('avg_WT', 0):.2f}"],
        ["Avg Turnaround Time", f"{metrics.get('avg_TT', 0):.2f}"],
        ["Avg Response Time", f"{metrics.get('avg_RT', 0):.2f}"],
    ]
    summary_tbl = Table(summary_data, colWidths=[7 * cm, 7 * cm])
    summary_tbl.setStyle(table_style)
    elems.append(summary_tbl)

    elems.append(Paragraph("Execution Sequence", h_style))
    elems.append(Paragraph(format_sequence(sequence), mono_style))

    elems.append(Paragraph("Processes", h_style))
    WT, TT, RT = metrics.get("WT", {}), metrics.get("TT", {}), metrics.get("RT", {})
    proc_data = [["Id", "Arrival", "Burst", "Start", "Finish", "RT", "WT", "TT"]]
    for p in processes:
        proc_data.append([str(v) for v in (p.id, p.arrival, p.burst, p.start_time, p.finish_time,
                                             RT.get(p.id, 0), WT.get(p.id, 0), TT.get(p.id, 0))])
    proc_tbl = Table(proc_data, repeatRows=1)
    proc_tbl.setStyle(table_style)
    elems.append(proc_tbl)

    if gantt_png_path:
        elems.append(NextPageTemplate("LAND"))
        elems.append(PageBreak())
        elems.append(Paragraph("Gantt Chart", title_style))
        elems.append(Spacer(1, 8))
        if os.path.exists(gantt_png_path):
            elems.append(Image(gantt_png_path, width=26.8 * cm, height=15.2 * cm))
        else:
            elems.append(Paragraph("Gantt image not found.", body_style))

    doc.build(elems)
    return path
