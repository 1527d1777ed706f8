"""Section-boundary detection for model-generated text."""

import re

MARKDOWN_HEADING_RE = re.compile(r"^#{1,6}\s+")
NUMBERED_HEADING_RE = re.compile(r"^\d+\.\s+[A-Z]")
COLON_TITLE_RE = re.compile(r"^[A-Z][^.!?]*:$")
BOLD_LINE_RE = re.compile(r"^\*\*[^*]+\*\*$")
CAPITALIZED_RE = re.compile(r"^[A-Z]")

SHORT_LINE_MIN = 5
SHORT_LINE_MAX = 60

_HEADING_PREFIX_RE = re.compile(r"^#+\s*")
_BOLD_EDGES_RE = re.compile(r"^\*\*|\*\*$")
_NUMBERING_RE = re.compile(r"^\d+\.\s*")
_TRAILING_COLON_RE = re.compile(r":$")


def is_short_capitalized(line: str) -> bool:
    """Low-confidence catch-all: short line starting with an uppercase letter."""
    return SHORT_LINE_MIN < len(line) < SHORT_LINE_MAX and bool(CAPITALIZED_RE.match(line))


def is_header_line(line: str) -> bool:
    """Return True if ``line`` looks like a section title."""
    line = line.strip()
    return bool(
        MARKDOWN_HEADING_RE.match(line)
        or NUMBERED_HEADING_RE.match(line)
        or COLON_TITLE_RE.match(line)
        or BOLD_LINE_RE.match(line)
        or is_short_capitalized(line)
    )


def clean_title(line: str) -> str:
    """Strip heading markers, bold markers, numbering and a trailing colon."""
    title = line.strip()
    title = _HEADING_PREFIX_RE.sub("", title)
    title = _BOLD_EDGES_RE.sub("", title)
    title = _NUMBERING_RE.sub("", title)
    title = _TRAILING_COLON_RE.sub("", title)
    return title.strip()


__all__ = ["is_header_line", "is_short_capitalized", "clean_title"]
