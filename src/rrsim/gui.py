# -*- coding: utf-8 -*-
"""
Round-Robin Simulator desktop viewer (PyQt + Matplotlib)
"""

import os
import random
import sys
from typing import Dict, List

# ---- PyQt imports (PyQt5 preferred, PyQt6 fallback) ----
try:
    from PyQt5.QtWidgets import (
        QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
        QGroupBox, QLabel, QPushButton, QSpinBox, QCheckBox, QTableWidget,
        QTableWidgetItem, QMessageBox, QFileDialog, QTabWidget, QTextBrowser,
        QHeaderView, QAbstractItemView
    )
    QT_API = "PyQt5"
except ImportError:
    from PyQt6.QtWidgets import (
        QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
        QGroupBox, QLabel, QPushButton, QSpinBox, QCheckBox, QTableWidget,
        QTableWidgetItem, QMessageBox, QFileDialog, QTabWidget, QTextBrowser,
        QHeaderView, QAbstractItemView
    )
    QT_API = "PyQt6"

import matplotlib
matplotlib.use("QtAgg")
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from .charts import assign_colors, draw_gantt, export_pdf_report
from .config import DEFAULT_MAX_SEQ_LEN, DEFAULT_QUANTUM
from .errors import SimulationError
from .models import Process, SimulationResult
from .reader import read_csv, write_csv
from .report import compute_metrics, format_metrics, format_sequence
from .simulator import RoundRobinSimulator

# keep the widget responsive on long runs
MAX_TIMELINE_LINES = 2000


# --------------------------
#  Compat helpers
# --------------------------
def set_header_stretch(header: QHeaderView):
    try:
        header.setSectionResizeMode(QHeaderView.Stretch)  # PyQt5
    except AttributeError:
        header.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)  # PyQt6


def set_select_rows(table: QTableWidget):
    try:
        table.setSelectionBehavior(QAbstractItemView.SelectRows)  # PyQt5
    except AttributeError:
        table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)  # PyQt6


class GanttCanvas(FigureCanvas):
    def __init__(self, parent=None):
        self.fig = Figure(figsize=(9, 5), dpi=100)
        super().__init__(self.fig)
        self.setParent(parent)
        self.ax = self.fig.add_subplot(111)

    def draw_gantt(self, processes, segments, title):
        draw_gantt(self.ax, processes, segments, title, assign_colors(processes))
        self.fig.tight_layout()
        self.draw()


# --------------------------
#  Main Window
# --------------------------
class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Round-Robin Simulator")
        self.resize(1400, 760)

        self.processes: List[Process] = []
        self.last_result = None
        self.last_metrics: Dict = {}

        self._build_ui()
        self._connect_signals()

    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(10)

        left = QVBoxLayout()
        root.addLayout(left, 1)

        grp_proc = QGroupBox("Processes")
        left.addWidget(grp_proc)
        proc_layout = QVBoxLayout(grp_proc)

        self.table = QTableWidget(0, 2)
        self.table.setHorizontalHeaderLabels(["Arrival", "Burst"])
        set_select_rows(self.table)
        self.table.setAlternatingRowColors(True)
        set_header_stretch(self.table.horizontalHeader())
        proc_layout.addWidget(self.table)

        btn_row = QHBoxLayout()
        proc_layout.addLayout(btn_row)
        self.btn_add = QPushButton("Add Row")
        self.btn_del = QPushButton("Delete Selected")
        self.btn_rand = QPushButton("Add Random")
        self.btn_clear = QPushButton("Clear")
        for b in (self.btn_add, self.btn_del, self.btn_rand, self.btn_clear):
            btn_row.addWidget(b)

        grp_ctrl = QGroupBox("Simulation Controls")
        left.addWidget(grp_ctrl)
        ctrl = QGridLayout(grp_ctrl)

        self.spin_quantum = QSpinBox()
        self.spin_quantum.setRange(1, 10**9)
        self.spin_quantum.setValue(DEFAULT_QUANTUM)

        self.spin_maxseq = QSpinBox()
        self.spin_maxseq.setRange(1, 10**6)
        self.spin_maxseq.setValue(DEFAULT_MAX_SEQ_LEN)

        self.chk_ff = QCheckBox("Fast-forward stable rounds")
        self.chk_ff.setChecked(True)

        r = 0
        ctrl.addWidget(QLabel("Quantum:"), r, 0)
        ctrl.addWidget(self.spin_quantum, r, 1); r += 1
        ctrl.addWidget(QLabel("Max sequence length:"), r, 0)
        ctrl.addWidget(self.spin_maxseq, r, 1); r += 1
        ctrl.addWidget(self.chk_ff, r, 0, 1, 2); r += 1

        io_row = QHBoxLayout()
        left.addLayout(io_row)
        self.btn_run = QPushButton("Run")
        self.btn_import = QPushButton("Import CSV")
        self.btn_export = QPushButton("Export CSV")
        self.btn_save_png = QPushButton("Save Gantt PNG")
        self.btn_report_pdf = QPushButton("Export PDF")
        for b in (self.btn_run, self.btn_import, self.btn_export, self.btn_save_png, self.btn_report_pdf):
            io_row.addWidget(b)

        self.lbl_seq = QLabel("seq = []")
        self.lbl_seq.setWordWrap(True)
        left.addWidget(self.lbl_seq)
        self.lbl_metrics = QLabel("")
        left.addWidget(self.lbl_metrics)

        tabs = QTabWidget()
        root.addWidget(tabs, 2)

        self.canvas = GanttCanvas(self)
        tabs.addTab(self.canvas, "Gantt")

        self.results_table = QTableWidget(0, 5)
        self.results_table.setHorizontalHeaderLabels(["Id", "Arrival", "Burst", "Start", "Finish"])
        set_header_stretch(self.results_table.horizontalHeader())
        tabs.addTab(self.results_table, "Results")

        self.timeline = QTextBrowser()
        tabs.addTab(self.timeline, "Decision Timeline")

    def _connect_signals(self):
        self.btn_add.clicked.connect(self.add_row)
        self.btn_del.clicked.connect(self.delete_selected)
        self.btn_rand.clicked.connect(self.add_random)
        self.btn_clear.clicked.connect(self.clear_all)
        self.btn_run.clicked.connect(self.run_simulation)
        self.btn_import.clicked.connect(self.import_csv)
        self.btn_export.clicked.connect(self.export_csv)
        self.btn_save_png.clicked.connect(self.save_gantt_png)
        self.btn_report_pdf.clicked.connect(self.export_pdf)

    # ---------- Processes table ops ----------
    def _set_row(self, r: int, arrival, burst):
        self.table.setItem(r, 0, QTableWidgetItem(str(arrival)))
        self.table.setItem(r, 1, QTableWidgetItem(str(burst)))

    def add_row(self):
        r = self.table.rowCount()
        self.table.insertRow(r)
        self._set_row(r, 0, 1)

    def add_random(self):
        r = self.table.rowCount()
        self.table.insertRow(r)
        self._set_row(r, random.randint(0, 10), random.randint(1, 20))

    def delete_selected(self):
        rows = sorted({i.row() for i in self.table.selectedItems()}, reverse=True)
        for r in rows:
            self.table.removeRow(r)

    def clear_all(self):
        self.table.setRowCount(0)
        self.processes = []
        self.last_result = None
        self.last_metrics = {}
        self.canvas.ax.clear()
        self.canvas.draw()
        self.results_table.setRowCount(0)
        self.timeline.setPlainText("")
        self.lbl_seq.setText("seq = []")
        self.lbl_metrics.setText("")

    def _read_processes_from_table(self) -> List[Process]:
        procs: List[Process] = []
        for r in range(self.table.rowCount()):
            cells = [self.table.item(r, c).text().strip() if self.table.item(r, c) else "" for c in (0, 1)]
            try:
                arrival, burst = int(cells[0]), int(cells[1])
            except ValueError:
                raise ValueError(f"Row {r + 1}: arrival and burst must be integers") from None
            if arrival < 0 or burst < 0:
                raise ValueError(f"Row {r + 1}: arrival and burst must be >= 0")
            procs.append(Process(id=r, arrival=arrival, burst=burst))
        return procs

    # ---------- Import/Export ----------
    def import_csv(self):
        path, _ = QFileDialog.getOpenFileName(self, "Import CSV", "", "CSV Files (*.csv)")
        if not path:
            return
        try:
            procs = read_csv(path)
        except (OSError, SimulationError) as e:
            QMessageBox.critical(self, "Import failed", str(e))
            return
        self.table.setRowCount(0)
        for p in procs:
            r = self.table.rowCount()
            self.table.insertRow(r)
            self._set_row(r, p.arrival, p.burst)

    def export_csv(self):
        path, _ = QFileDialog.getSaveFileName(self, "Export CSV", "processes.csv", "CSV Files (*.csv)")
        if not path:
            return
        try:
            write_csv(path, self.processes or self._read_processes_from_table())
        except (OSError, ValueError) as e:
            QMessageBox.critical(self, "Export failed", str(e))

    def save_gantt_png(self):
        if self.last_result is None:
            QMessageBox.information(self, "Nothing to save", "Run a simulation first.")
            return
        path, _ = QFileDialog.getSaveFileName(self, "Save Gantt PNG", "gantt.png", "PNG Files (*.png)")
        if not path:
            return
        try:
            self.canvas.fig.savefig(path, dpi=160, bbox_inches="tight")
        except OSError as e:
            QMessageBox.critical(self, "Save failed", str(e))

    def export_pdf(self):
        if self.last_result is None:
            QMessageBox.information(self, "Nothing to export", "Run a simulation first.")
            return
        path, _ = QFileDialog.getSaveFileName(self, "Export PDF Report", "report.pdf", "PDF Files (*.pdf)")
        if not path:
            return
        tmp_png = os.path.join(os.path.dirname(path), "_gantt_tmp.png")
        try:
            self.canvas.fig.savefig(tmp_png, dpi=240, bbox_inches="tight")
            export_pdf_report(path, self.spin_quantum.value(), self.spin_maxseq.value(),
                              self.processes, self.last_result.sequence, self.last_metrics, tmp_png)
        except OSError as e:
            QMessageBox.critical(self, "Export failed", str(e))
        finally:
            if os.path.exists(tmp_png):
                os.remove(tmp_png)

    # ---------- Run ----------
    def run_simulation(self):
        try:
            procs = self._read_processes_from_table()
        except ValueError as e:
            QMessageBox.critical(self, "Error", str(e))
            return
        if not procs:
            QMessageBox.warning(self, "No processes", "Please add at least one process.")
            return

        sim = RoundRobinSimulator(
            self.spin_quantum.value(), self.spin_maxseq.value(),
            fast_forward=self.chk_ff.isChecked(),
            trace_decisions=True, record_segments=True,
        )
        result = sim.run(procs)
        self.processes = procs
        self.last_result = result
        self.last_metrics = compute_metrics(procs)

        self.lbl_seq.setText(f"seq = {format_sequence(result.sequence)}")
        self.lbl_metrics.setText(format_metrics(self.last_metrics))
        self._fill_results(procs)
        self._render_timeline(result)
        self.canvas.draw_gantt(procs, result.segments, f"Round Robin (q={sim.quantum})")

    def _fill_results(self, procs: List[Process]):
        self.results_table.setRowCount(0)
        for p in procs:
            r = self.results_table.rowCount()
            self.results_table.insertRow(r)
            for c, v in enumerate((p.id, p.arrival, p.burst, p.start_time, p.finish_time)):
                self.results_table.setItem(r, c, QTableWidgetItem(str(v)))

    def _render_timeline(self, result: SimulationResult):
        lines = result.log[:MAX_TIMELINE_LINES]
        if len(result.log) > MAX_TIMELINE_LINES:
            lines.append(f"... {len(result.log) - MAX_TIMELINE_LINES} more lines")
        self.timeline.setPlainText("\n".join(lines))


def main():
    app = QApplication(sys.argv)
    w = MainWindow()
    w.show()
    sys.exit(app.exec_() if hasattr(app, "exec_") else app.exec())


if __name__ == "__main__":
    main()
