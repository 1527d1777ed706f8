"""Per-section enrichment: key points, code snippets and examples."""

import re
from typing import List, Optional

from .models import CodeSnippet, Section

MAX_KEY_POINTS = 5
MAX_INLINE_SNIPPETS = 3
MAX_EXAMPLES = 3

DEFAULT_CODE_LANGUAGE = "text"
FENCED_DESCRIPTION = "Code example"
INLINE_DESCRIPTION = "Inline code"

LIST_ITEM_RE = re.compile(r"^[ \t]*(?:\d+\.?|[-*+])[ \t]*(.+)$", re.MULTILINE)
FENCED_BLOCK_RE = re.compile(r"```(\w+)?\n(.*?)```", re.DOTALL)
INLINE_CODE_RE = re.compile(r"`([^`]+)`")
EXAMPLE_RE = re.compile(
    r"\b(?:por ejemplo|for example|for instance|such as|ejemplo|como|e\.g\.)[:,\s]+[^.!?]+[.!?]",
    re.IGNORECASE,
)


def extract_key_points(text: str) -> List[str]:
    """Numbered or bulleted lines with the list marker stripped."""
    points: List[str] = []
    for match in LIST_ITEM_RE.finditer(text):
        point = match.group(1).strip()
        if point:
            points.append(point)
    return points[:MAX_KEY_POINTS]


def extract_code_snippets(text: str) -> List[CodeSnippet]:
    """Fenced blocks first; inline spans only when no fenced block exists."""
    snippets = [
        CodeSnippet(
            language=match.group(1) or DEFAULT_CODE_LANGUAGE,
            code=match.group(2).strip(),
            description=FENCED_DESCRIPTION,
        )
        for match in FENCED_BLOCK_RE.finditer(text)
    ]
    if snippets:
        return snippets

    for match in INLINE_CODE_RE.finditer(text):
        if len(snippets) >= MAX_INLINE_SNIPPETS:
            break
        snippets.append(
            CodeSnippet(
                language=DEFAULT_CODE_LANGUAGE,
                code=match.group(1),
                description=INLINE_DESCRIPTION,
            )
        )
    return snippets


def extract_examples(text: str) -> List[str]:
    """Trigger phrase through the next sentence terminator, in text order."""
    return [match.group(0).strip() for match in EXAMPLE_RE.finditer(text)][:MAX_EXAMPLES]


def enrich_section(title: str, buffer: str, include_examples: bool = False) -> Section:
    """Close out a section from its accumulated content buffer.

    Args:
        title: Cleaned section title
        buffer: Raw line-accumulated content
        include_examples: Whether to extract usage examples

    Returns:
        Frozen Section with trimmed content and extracted features
    """
    examples: Optional[List[str]] = extract_examples(buffer) if include_examples else None
    return Section(
        title=title,
        content=buffer.strip(),
        key_points=extract_key_points(buffer),
        code_snippets=extract_code_snippets(buffer),
        examples=examples,
    )


__all__ = [
    "extract_key_points",
    "extract_code_snippets",
    "extract_examples",
    "enrich_section",
    "MAX_KEY_POINTS",
    "MAX_EXAMPLES",
]
