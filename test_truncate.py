"""Tests for max-line truncation and overflow reassembly."""

import pytest

from textlayout.layout.truncate import TruncationResult, truncate_lines
from textlayout.layout.wrap import wrap_text
from textlayout.metrics import FixedWidthMetrics, FontState

FONT = FontState(faces=("monospace",), size=20)
MEASURE = FixedWidthMetrics()

# At width 20 every two-letter word lands on its own line
WIDTH = 20


def truncate(text: str, max_lines: int | None, suffix: str | None = None) -> TruncationResult:
    wrapped = wrap_text(text, WIDTH, MEASURE, FONT)
    return truncate_lines(wrapped, max_lines, suffix, WIDTH, MEASURE, FONT)


def test_unset_max_lines_keeps_everything() -> None:
    result = truncate("aa bb cc", None)

    assert result.lines == ("aa", "bb", "cc")
    assert not result.truncated
    assert result.remaining_text == ""


def test_zero_max_lines_means_unlimited() -> None:
    assert not truncate("aa bb cc", 0).truncated


def test_line_count_within_limit_is_untouched() -> None:
    result = truncate("aa bb cc", 3)

    assert result.lines == ("aa", "bb", "cc")
    assert not result.truncated


def test_suffix_is_appended_to_last_visible_line() -> None:
    result = truncate("aa bb cc dd ee", 2, "...")

    assert result.lines == ("aa", "bb...")
    assert result.truncated
    assert result.remaining_text == "cc dd ee"


def test_suffix_overflow_starts_the_remaining_text() -> None:
    result = truncate("aa bb cc dd ee", 2, " more")

    assert result.lines == ("aa", "bb")
    assert result.remaining_text == "more cc dd ee"


def test_without_suffix_overflow_is_joined_with_spaces() -> None:
    result = truncate("aa bb cc dd ee", 3)

    assert result.lines == ("aa", "bb", "cc")
    assert result.remaining_text == "dd ee"


def test_remaining_text_keeps_paragraph_breaks() -> None:
    result = truncate("aa bb\ncc dd\nee", 1)

    assert result.lines == ("aa",)
    assert result.remaining_text == "bb\ncc dd\nee"


def test_truncation_on_paragraph_boundary() -> None:
    result = truncate("aa bb\ncc dd\nee", 2, "...")

    assert result.lines == ("aa", "bb...")
    assert result.remaining_text == "cc dd\nee"


def test_suffix_overflow_on_paragraph_boundary_joins_next_paragraph() -> None:
    # The suffix overflow shares a bucket with the first overflow line
    result = truncate("aa bb\ncc dd\nee", 2, " x")

    assert result.lines == ("aa", "bb")
    assert result.remaining_text == "x cc dd\nee"


def test_paragraphs_survive_reassembly() -> None:
    text = "aa bb\ncc dd\nee"
    result = truncate(text, 1)

    rejoined = "\n".join(result.lines) + " " + result.remaining_text
    assert rejoined.split("\n") == text.split("\n")


@pytest.mark.parametrize(
    ("text", "max_lines", "suffix"),
    [
        ("aa bb cc\ndd ee\nff", 2, "..."),
        ("aa bb cc\ndd ee\nff", 1, " zz"),
        ("aa bb\ncc dd ee\nff", 4, " yy xx"),
        ("aaaa bb\ncc dd ee\nff", 1, " zzzzzz yy"),
        ("aa bb cc", 1, "\nmore"),
    ],
)
def test_paragraphs_survive_reassembly_with_suffix(text: str, max_lines: int, suffix: str) -> None:
    wrapped = wrap_text(text, WIDTH, MEASURE, FONT)
    result = truncate_lines(wrapped, max_lines, suffix, WIDTH, MEASURE, FONT)
    paragraphs = text.split("\n")

    # Paragraph holding the last visible line, and where that paragraph ends
    cut = sum(1 for index in wrapped.newline_indices if index < max_lines)
    end = min((index for index in wrapped.newline_indices if index > max_lines), default=len(wrapped.lines))
    hidden_tail = " ".join(wrapped.lines[max_lines:end])

    assert result.truncated
    assert result.lines[:-1] == wrapped.lines[: max_lines - 1]
    assert result.lines[-1].startswith(wrapped.lines[max_lines - 1])

    buckets = result.remaining_text.split("\n")
    overflow = buckets[0][: len(buckets[0]) - len(hidden_tail)].rstrip()

    # Only suffix words spill ahead of the hidden part of the cut paragraph
    assert buckets[0].endswith(hidden_tail)
    assert all(word in suffix.split() for word in overflow.split())
    assert buckets[1:] == paragraphs[cut + 1 :]
