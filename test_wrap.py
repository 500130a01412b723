"""Tests for greedy word wrapping."""

import pytest

from textlayout.layout.wrap import WrapResult, split_lines, wrap_text
from textlayout.metrics import FixedWidthMetrics, FontState

# 20 unit font at 0.5 em per character: every character (and space) is 10 units wide
FONT = FontState(faces=("monospace",), size=20)
MEASURE = FixedWidthMetrics()


def wrap(text: str, width: float) -> WrapResult:
    return wrap_text(text, width, MEASURE, FONT)


@pytest.mark.parametrize("width", [-5, 0, 10, 35, 1000])
def test_text_without_spaces_is_a_single_line(width: float) -> None:
    assert wrap("unbreakable", width).lines == ("unbreakable",)


def test_wide_wrap_width_keeps_text_on_one_line() -> None:
    result = wrap("Hello world", 1000)

    assert result.lines == ("Hello world",)
    assert result.newline_indices == ()


def test_two_words_per_line() -> None:
    # one=30, two=30, three=50, four=40; each word plus space must fit what is left
    assert wrap("one two three four", 100).lines == ("one two", "three four")


def test_word_wider_than_wrap_width_gets_its_own_line() -> None:
    result = wrap("supercalifragilistic is long", 50)

    assert result.lines == ("supercalifragilistic", "is", "long")


def test_overflowing_word_after_first_breaks_before_it() -> None:
    assert wrap("a supercalifragilistic b", 50).lines == ("a", "supercalifragilistic", "b")


def test_non_positive_wrap_width_puts_every_word_on_its_own_line() -> None:
    assert wrap("a b c", 0).lines == ("a", "b", "c")
    assert wrap("a b c", -10).lines == ("a", "b", "c")


def test_lines_fit_when_wrap_width_covers_widest_word() -> None:
    text = "the quick brown fox jumps over the lazy dog again and again"
    widest = max(MEASURE(word, FONT) for word in text.split(" "))

    for width in (widest, widest + 15, widest * 2, widest * 3 + 5):
        for line in wrap(text, width).lines:
            assert MEASURE(line, FONT) <= width


def test_explicit_newlines_start_paragraphs() -> None:
    result = wrap("aa bb\ncc\r\ndd", 1000)

    assert result.lines == ("aa bb", "cc", "dd")
    assert result.newline_indices == (1, 2)
    assert result.starts_paragraph(1)
    assert not result.starts_paragraph(0)


def test_paragraph_boundaries_point_at_first_wrapped_line() -> None:
    result = wrap("aa bb\ncc dd\nee", 20)

    assert result.lines == ("aa", "bb", "cc", "dd", "ee")
    assert result.newline_indices == (2, 4)


def test_empty_paragraph_produces_empty_line() -> None:
    result = wrap("a\n\nb", 1000)

    assert result.lines == ("a", "", "b")
    assert result.newline_indices == (1, 2)


def test_empty_text_is_one_empty_line() -> None:
    assert wrap("", 100).lines == ("",)


def test_split_lines_without_wrapping() -> None:
    result = split_lines("one two three\r\nfour\rfive\nsix")

    assert result.lines == ("one two three", "four", "five", "six")
    assert result.newline_indices == (1, 2, 3)


def test_measurer_sees_font_state() -> None:
    seen: list[FontState] = []

    def measure(text: str, font: FontState) -> float:
        seen.append(font)
        return float(len(text))

    wrap_text("a b", 10, measure, FONT)

    assert seen and all(font == FONT for font in seen)
