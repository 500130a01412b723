"""Tests for the command line interface."""

import json
from pathlib import Path

from click.testing import CliRunner

from textlayout.cli import main


def test_measure_prints_layout_info() -> None:
    result = CliRunner().invoke(main, ["measure", "Hello world", "--font-size", "20"])

    assert result.exit_code == 0, result.output
    info = json.loads(result.output)
    assert info["lines"] == ["Hello world"]
    assert info["w"] == 110
    assert info["h"] == 50
    assert info["more_text_lines"] is False


def test_measure_truncates() -> None:
    result = CliRunner().invoke(
        main,
        ["measure", "aa bb cc dd", "--font-size", "20", "--width", "20", "--max-lines", "1", "--suffix", "."],
    )

    assert result.exit_code == 0, result.output
    info = json.loads(result.output)
    assert info["lines"] == ["aa."]
    assert info["more_text_lines"] is True
    assert info["remaining_text"] == "bb cc dd"


def test_measure_without_wrapping() -> None:
    result = CliRunner().invoke(main, ["measure", "aa bb cc", "--font-size", "20", "--width", "20", "--no-wrap"])

    assert json.loads(result.output)["lines"] == ["aa bb cc"]


def test_measure_with_style_file(tmp_path: Path) -> None:
    style_path = tmp_path / "style.toml"
    style_path.write_text("[style]\nfontSize = 20\npaddingLeft = 5\n")

    result = CliRunner().invoke(main, ["measure", "abc", "--style", str(style_path), "--precision", "2"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["w"] == (30 + 5) * 2


def test_invalid_settings_exit_with_error() -> None:
    result = CliRunner().invoke(main, ["measure", "abc", "--precision", "0"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_render_writes_image(tmp_path: Path) -> None:
    output = tmp_path / "text.png"

    result = CliRunner().invoke(
        main, ["render", "Hello world", "-o", str(output), "--font-size", "20", "--align", "center"]
    )

    assert result.exit_code == 0, result.output
    assert output.exists()
    assert "✓ Rendered 1 line(s)" in result.output
