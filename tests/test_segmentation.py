"""Tests for SectionSegmenter."""

from structuring.segmentation import FALLBACK_SECTION_TITLE, SectionSegmenter


def test_sections_follow_markdown_headings():
    text = "# First\nalpha line\n## Second\nbeta line\n### Third\ngamma line\n"
    sections = SectionSegmenter().segment(text)

    assert [s.title for s in sections] == ["First", "Second", "Third"]
    assert [s.content for s in sections] == ["alpha line", "beta line", "gamma line"]


def test_heading_count_matches_section_count():
    text = "# A\n# B\nsome text\n# C\n"
    sections = SectionSegmenter().segment(text)
    assert len(sections) == 3
    assert sections[0].content == ""


def test_text_before_first_header_is_not_a_section():
    text = "preamble in lowercase\n# Only\nbody text\n"
    sections = SectionSegmenter().segment(text)
    assert len(sections) == 1
    assert sections[0].title == "Only"
    assert sections[0].content == "body text"


def test_fallback_section_keeps_whole_text():
    text = "just some lowercase words here.\nand more of them.\n"
    sections = SectionSegmenter().segment(text)

    assert len(sections) == 1
    assert sections[0].title == FALLBACK_SECTION_TITLE
    assert sections[0].content == text


def test_empty_text_still_yields_one_section():
    sections = SectionSegmenter().segment("")
    assert len(sections) == 1
    assert sections[0].title == FALLBACK_SECTION_TITLE


def test_code_indentation_is_preserved():
    text = "# Code\n```python\ndef f():\n    return 1\n```\n"
    sections = SectionSegmenter().segment(text)

    snippet = sections[0].code_snippets[0]
    assert snippet.language == "python"
    assert snippet.code == "def f():\n    return 1"


def test_examples_only_when_requested():
    text = "# Usage\nfor example: call it twice.\n"
    assert SectionSegmenter().segment(text)[0].examples is None
    assert SectionSegmenter(include_examples=True).segment(text)[0].examples == [
        "for example: call it twice."
    ]


def test_crlf_line_endings():
    text = "# One\r\nfirst body\r\n# Two\r\nsecond body\r\n"
    sections = SectionSegmenter().segment(text)
    assert [s.title for s in sections] == ["One", "Two"]
    assert sections[0].content == "first body"
