"""CLI generation integration tests."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner
from serdec_codegen.cli import cli, main
from serdec_codegen.configuration import SETTINGS_PATH_ENV_VAR


def _sample_schema() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "bgp-neighbor.yaml"


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SETTINGS_PATH_ENV_VAR, raising=False)


def test_generates_skeleton_for_sample_schema() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, [str(_sample_schema())])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("/" * 79 + "\n// NAME:            bgp-neighbor.c\n")
    assert result.output.endswith(
        "#include <serdec/yaml.h>\n\n"
        "int bgp_neighbor_deserialize_from_yaml_string(const char* string, BgpNeighbor* data)"
        " { }\n"
    )


def test_output_is_byte_identical_across_runs() -> None:
    runner = CliRunner()
    first = runner.invoke(cli, [str(_sample_schema())])
    second = runner.invoke(cli, [str(_sample_schema())])

    assert first.exit_code == 0
    assert first.output == second.output


def test_names_follow_the_file_not_the_document(tmp_path: Path) -> None:
    renamed = tmp_path / "widget.yml"
    shutil.copyfile(_sample_schema(), renamed)

    result = CliRunner().invoke(cli, [str(renamed)])

    assert result.exit_code == 0
    assert "// NAME:            widget.c\n" in result.output
    assert "int widget_deserialize_from_yaml_string(const char* string, Widget* data) { }\n" in (
        result.output
    )


def test_settings_file_from_environment_is_applied(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text(
        "generator:\n"
        "  license: GPL-3.0-or-later\n"
        "  copyright: Copyright 2026, Example Org\n"
        "  output_format: json\n"
        "  output_suffix: .cc\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(SETTINGS_PATH_ENV_VAR, str(settings_path))

    result = CliRunner().invoke(cli, [str(_sample_schema())])

    assert result.exit_code == 0
    assert "// NAME:            bgp-neighbor.cc\n" in result.output
    assert "// Copyright 2026, Example Org\n" in result.output
    assert "GNU General Public License" in result.output
    assert "#include <serdec/json.h>\n" in result.output
    assert "bgp_neighbor_deserialize_from_json_string(" in result.output


def test_invalid_settings_file_fails_without_output(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("generator:\n  license: BSD\n", encoding="utf-8")
    monkeypatch.setenv(SETTINGS_PATH_ENV_VAR, str(settings_path))

    exit_code = main([str(_sample_schema())])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert "generator.license 'BSD'" in captured.err


def test_undeclared_required_names_are_warned_about(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    schema_path = tmp_path / "bgp-neighbor.yaml"
    schema_path.write_text(
        _sample_schema()
        .read_text(encoding="utf-8")
        .replace("  - remote-as\n", "  - remote-as\n  - password\n"),
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="serdec_codegen"):
        result = CliRunner().invoke(cli, [str(schema_path)])

    assert result.exit_code == 0
    assert "Required property 'password' is not declared in properties." in caplog.text
    assert "BgpNeighbor* data" in result.output


def test_main_returns_zero_and_writes_to_stdout(capsys) -> None:
    exit_code = main([str(_sample_schema())])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "BgpNeighbor* data) { }" in captured.out


def test_outline_stub_body_lists_properties_with_source_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("generator:\n  stub_body: outline\n", encoding="utf-8")
    monkeypatch.setenv(SETTINGS_PATH_ENV_VAR, str(settings_path))

    result = CliRunner().invoke(cli, [str(_sample_schema())])

    assert result.exit_code == 0
    assert result.output.endswith(
        "int bgp_neighbor_deserialize_from_yaml_string(const char* string, BgpNeighbor* data) {\n"
        "    // address: string\n"
        "    // hold-time: integer (default 90)\n"
        "    // remote-as: integer\n"
        "    // timers: $ref bgp-timers\n"
        "}\n"
    )
