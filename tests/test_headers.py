"""Tests for section-boundary detection."""

import pytest

from structuring.headers import clean_title, is_header_line


@pytest.mark.parametrize(
    "line",
    [
        "# Title",
        "###### Deep heading",
        "   ## Indented heading   ",
        "1. Introduction",
        "Key concepts:",
        "**Bold Title**",
        "Short Title",
    ],
)
def test_header_lines(line):
    assert is_header_line(line)


@pytest.mark.parametrize(
    "line",
    [
        "",
        "Hi",
        "####### Seven hashes",
        "#hashtag",
        "1. lowercase item",
        "note: lowercase label",
        "this starts lowercase and is short",
        "This is a fairly long sentence that goes on well past sixty characters in total.",
        "- bullet item",
    ],
)
def test_non_header_lines(line):
    assert not is_header_line(line)


def test_catch_all_length_bounds_are_strict():
    assert not is_header_line("Abcde")  # exactly 5
    assert is_header_line("Abcdef")
    assert is_header_line("A" * 59)
    assert not is_header_line("A" * 60 + " and more words here.")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("## 1. Intro:", "Intro"),
        ("**Setup**", "Setup"),
        ("Key concepts:", "Key concepts"),
        ("3. Results", "Results"),
        ("   # Spaced   ", "Spaced"),
    ],
)
def test_clean_title(line, expected):
    assert clean_title(line) == expected
