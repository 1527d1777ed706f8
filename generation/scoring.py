"""Heuristic quality scores for generated responses."""

import math
import re

from structuring import StructuredContent

CHARS_PER_TOKEN = 4

_MARKDOWN_HEADER_RE = re.compile(r"^#+\s", re.MULTILINE)
_NUMBERED_LIST_RE = re.compile(r"^\d+\.", re.MULTILINE)


def _clamp(value: float) -> float:
    return round(min(1.0, max(0.0, value)), 2)


def estimate_tokens(text: str) -> int:
    """Approximate token count (4 characters per token)."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def calculate_confidence(response: str) -> float:
    """Score how well-formed a raw response looks, in [0, 1]."""
    confidence = 0.5

    if len(response) < 100:
        confidence -= 0.2
    if len(response) > 500:
        confidence += 0.2

    if "\n\n" in response:
        confidence += 0.1
    if _MARKDOWN_HEADER_RE.search(response):
        confidence += 0.1
    if _NUMBERED_LIST_RE.search(response):
        confidence += 0.1

    lower = response.lower()
    if "example" in lower or "ejemplo" in lower:
        confidence += 0.1
    if "```" in response:
        confidence += 0.1

    return _clamp(confidence)


def assess_content_quality(content: StructuredContent) -> float:
    """Score the richness of a structuring result, in [0, 1]."""
    quality = 0.5

    if len(content.sections) > 1:
        quality += 0.2
    if content.key_takeaways:
        quality += 0.1
    if len(content.summary) > 50:
        quality += 0.1

    if any(section.subsections for section in content.sections):
        quality += 0.1
    if any(section.examples for section in content.sections):
        quality += 0.1
    if any(section.code_snippets for section in content.sections):
        quality += 0.1

    return _clamp(quality)


__all__ = ["estimate_tokens", "calculate_confidence", "assess_content_quality"]
