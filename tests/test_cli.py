"""Tests for the command-line entry point."""

import io

import pytest

from svg_opti_detector import analyzer, cli
from tests.conftest import HalvingOptimizer


@pytest.fixture(autouse=True)
def fake_optimizer(monkeypatch):
    monkeypatch.setattr(analyzer, "ScourOptimizer", HalvingOptimizer)


@pytest.fixture
def page(tmp_path, duplicate_page_html):
    path = tmp_path / "page.html"
    path.write_text(duplicate_page_html, encoding="utf-8")
    return path


def test_parse_args_flags():
    args = cli.parse_args(["page.html", "-d", "--sort-by-savings"])

    assert args.source == "page.html"
    assert args.duplicates is True
    assert args.sort_by_savings is True


def test_missing_source_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_args([])
    assert excinfo.value.code == 2


def test_main_prints_report(page, capsys):
    assert cli.main([str(page)]) == 0
    out = capsys.readouterr().out

    assert "Found 3 SVG(s) to analyze..." in out
    assert "INDIVIDUAL SVG ANALYSIS" in out
    assert "ANALYSIS RESULTS" in out
    assert "DUPLICATE SVGs DETECTED" not in out


def test_main_duplicates_section(page, capsys):
    assert cli.main([f"file://{page}", "--duplicates"]) == 0
    out = capsys.readouterr().out

    assert "[DUPLICATE]" in out
    assert "Found at indices: [0, 1]" in out


def test_main_missing_file_exits_nonzero(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.html")]) == 1
    assert "Found" not in capsys.readouterr().out


def test_main_no_svgs(tmp_path, capsys):
    path = tmp_path / "empty.html"
    path.write_text("<html><body><p>nothing</p></body></html>", encoding="utf-8")

    assert cli.main([str(path)]) == 0
    assert "No inline SVGs found." in capsys.readouterr().out


def test_progress_printer_writes_percentages():
    stream = io.StringIO()
    printer = cli.ProgressPrinter(stream)
    printer(1, 3)
    printer(3, 3)
    printer.finish()

    assert stream.getvalue() == "\rProcessing SVGs... 33%\rProcessing SVGs... 100%\n"


def test_progress_printer_silent_when_unused():
    stream = io.StringIO()
    cli.ProgressPrinter(stream).finish()
    assert stream.getvalue() == ""
