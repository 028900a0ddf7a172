import io

import pytest

from rrsim.cli import main


@pytest.fixture
def stdin(monkeypatch):
    def feed(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return feed


def test_runs_from_stdin(stdin, capsys):
    stdin("5 3\n")
    assert main(["2", "10"]) == 0
    out = capsys.readouterr().out
    assert "Reading in lines from stdin..." in out
    assert "Running simulate_rr(q=2,maxs=10,procs=[1])" in out
    assert "Elapsed time  :" in out
    assert "seq = [-1,0]" in out


def test_reads_input_file(tmp_path, capsys):
    path = tmp_path / "procs.txt"
    path.write_text("0 3\n1 4\n5 2\n", encoding="utf-8")
    assert main(["100", "10", "-i", str(path)]) == 0
    assert "seq = [0,1,2]" in capsys.readouterr().out


def test_bad_record_exits_with_error(stdin, capsys):
    stdin("0 1\n1 2 3\n")
    assert main(["2", "10"]) == 1
    assert "Error on line 2: need 2 ints per line" in capsys.readouterr().out


def test_missing_input_file(tmp_path, capsys):
    assert main(["2", "10", "-i", str(tmp_path / "nope.txt")]) == 1
    assert "Could not read input" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [[], ["2"], ["two", "10"], ["2", "ten"], ["0", "10"], ["2", "-1"]])
def test_usage_errors(argv, stdin):
    stdin("")
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_timeline_and_no_fast_forward(stdin, capsys):
    stdin("0 4\n0 4\n")
    assert main(["1", "2", "--timeline", "--no-fast-forward"]) == 0
    out = capsys.readouterr().out
    assert "t=0 → Pick 0 (head of ReadyQueue)." in out
    assert "Fast-forward" not in out


def test_writes_gantt_and_pdf(stdin, tmp_path):
    stdin("0 3\n2 5\n")
    png = tmp_path / "g.png"
    pdf = tmp_path / "r.pdf"
    assert main(["2", "10", "--gantt", str(png), "--pdf", str(pdf)]) == 0
    assert png.exists()
    assert pdf.exists()


def test_pdf_alone_cleans_up_chart(stdin, tmp_path):
    stdin("0 3\n")
    pdf = tmp_path / "r.pdf"
    assert main(["2", "10", "--pdf", str(pdf)]) == 0
    assert [p.name for p in tmp_path.iterdir()] == ["r.pdf"]
