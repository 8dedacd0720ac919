"""CLI error-handling tests."""

from __future__ import annotations

import io
from pathlib import Path

from serdec_codegen.cli import main


def test_missing_argument_returns_clean_click_error(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing argument" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["--bogus", "widget.yaml"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_schema_file_fails_before_any_output(tmp_path: Path, capsys) -> None:
    exit_code = main([str(tmp_path / "bgp-neighbor.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert "Failed to read schema file" in captured.err
    assert "Traceback" not in captured.err


def test_malformed_schema_reports_field(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "widget.yaml"
    schema_path.write_text("title: only a title\n", encoding="utf-8")

    exit_code = main([str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert "Schema field '$schema' is required." in captured.err


def test_invalid_file_name_is_reported(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "-widget.yaml"
    schema_path.write_text(
        Path(__file__).resolve().parents[3].joinpath("samples", "bgp-neighbor.yaml").read_text(
            encoding="utf-8"
        ),
        encoding="utf-8",
    )

    exit_code = main([str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert "Invalid Name" in captured.err


class _ClosedPipeStdout(io.StringIO):
    def flush(self) -> None:
        raise BrokenPipeError(32, "Broken pipe")


def test_broken_pipe_on_stdout_flush_is_reported_cleanly(monkeypatch, capsys) -> None:
    sample = Path(__file__).resolve().parents[3] / "samples" / "bgp-neighbor.yaml"
    monkeypatch.setattr("sys.stdout", _ClosedPipeStdout())

    exit_code = main([str(sample)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Broken pipe" in captured.err
    assert "Traceback" not in captured.err
