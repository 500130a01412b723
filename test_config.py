"""Tests for style settings validation and loading."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from textlayout.config import StyleSettings, load_style
from textlayout.metrics import FontState


def test_defaults() -> None:
    settings = StyleSettings(text="abc")

    assert settings.font_face == ("sans-serif",)
    assert settings.font_size == 40
    assert settings.word_wrap
    assert settings.max_lines is None
    assert settings.precision == 1
    assert settings.effective_line_height == 40
    assert settings.effective_offset_y == 40


def test_camel_case_aliases() -> None:
    settings = StyleSettings(
        text="abc", fontSize=12, maxLines=2, maxLinesSuffix="..", wordWrapWidth=50, cutSx=3, textAlign="right"
    )

    assert settings.font_size == 12
    assert settings.max_lines == 2
    assert settings.max_lines_suffix == ".."
    assert settings.word_wrap_width == 50
    assert settings.cut_sx == 3
    assert settings.effective_text_align == "right"


def test_font_face_string_becomes_list() -> None:
    assert StyleSettings(text="a", fontFace="Roboto").font_face == ("Roboto",)
    assert StyleSettings(text="a", fontFace=["Roboto", "serif"]).font_face == ("Roboto", "serif")


def test_zero_dimensions_are_unset() -> None:
    settings = StyleSettings(text="a", w=0, h=0, lineHeight=0, maxLines=0, wordWrapWidth=0)

    assert settings.w is None
    assert settings.h is None
    assert settings.max_lines is None
    assert settings.word_wrap_width is None
    assert settings.effective_line_height == settings.font_size


def test_zero_offset_y_is_kept() -> None:
    assert StyleSettings(text="a", offsetY=0).effective_offset_y == 0


@pytest.mark.parametrize(
    "invalid",
    [{"precision": 0}, {"precision": -1}, {"fontSize": 0}, {"maxLines": -1}],
)
def test_invalid_settings_are_rejected(invalid: dict) -> None:
    with pytest.raises(ValidationError):
        StyleSettings(text="a", **invalid)


def test_text_is_required() -> None:
    with pytest.raises(ValidationError):
        StyleSettings()


def test_settings_are_immutable() -> None:
    settings = StyleSettings(text="a")

    with pytest.raises(ValidationError):
        settings.font_size = 10


def test_unsupported_alignment_acts_as_left(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="textlayout.config"):
        settings = StyleSettings(text="a", textAlign="justify")

    assert settings.effective_text_align == "left"
    assert "justify" in caplog.text


def test_clip_flags() -> None:
    assert not StyleSettings(text="a").clip_origin_set
    assert StyleSettings(text="a", cutEx=10).clip_x_set
    assert not StyleSettings(text="a", cutEx=10).clip_origin_set
    assert StyleSettings(text="a", cutSy=1).clip_origin_set


def test_font_state() -> None:
    settings = StyleSettings(text="a", fontFace=["Roboto", "sans-serif"], fontStyle="bold", fontSize=24, precision=2)

    assert settings.font_state() == FontState(("Roboto", "sans-serif"), "bold", 24, "alphabetic")
    assert settings.font_state(scaled=True).size == 48
    assert settings.font_state().css == 'bold 24px "Roboto","sans-serif"'


def test_font_state_style_flags() -> None:
    assert FontState(("a",), "bold italic").is_bold
    assert FontState(("a",), "oblique").is_italic
    assert not FontState(("a",)).is_bold


def test_load_style_table(tmp_path: Path) -> None:
    style_path = tmp_path / "style.toml"
    style_path.write_text(
        '[style]\nfontSize = 30\nmaxLinesSuffix = "..."\ntextAlign = "center"\nfont_face = ["Roboto"]\n'
    )

    settings = load_style(style_path, text="Hello")

    assert settings.text == "Hello"
    assert settings.font_size == 30
    assert settings.max_lines_suffix == "..."
    assert settings.text_align == "center"
    assert settings.font_face == ("Roboto",)


def test_load_style_overrides_win(tmp_path: Path) -> None:
    style_path = tmp_path / "style.toml"
    style_path.write_text('text = "from file"\nfontSize = 30\n')

    settings = load_style(style_path, font_size=12)

    assert settings.text == "from file"
    assert settings.font_size == 12


def test_load_style_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_style(tmp_path / "missing.toml")
