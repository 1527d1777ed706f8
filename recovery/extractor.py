"""Locate and parse a JSON object inside untrusted model output.

Strategies run in order and the first full parse wins:

1. direct: the trimmed text is itself a ``{...}`` object
2. fenced: the first ```` ```json ```` fenced block
3. braces: the span from the first ``{`` to the last ``}``

Parse failures of any kind are
swallowed; when every strategy fails the caller gets a
``NotFound`` value rather than an exception.
"""

import json
import re
from typing import Callable, List, Optional, Tuple

from loguru import logger

from .models import Found, JSONRecoveryResult, NotFound

JSON_FENCE_RE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)
BRACE_SPAN_RE = re.compile(r"\{.*\}", re.DOTALL)


def _direct_candidate(text: str) -> Optional[str]:
    if text.startswith("{") and text.endswith("}"):
        return text
    return None


def _fenced_candidate(text: str) -> Optional[str]:
    match = JSON_FENCE_RE.search(text)
    return match.group(1).strip() if match else None


def _brace_candidate(text: str) -> Optional[str]:
    match = BRACE_SPAN_RE.search(text)
    return match.group(0) if match else None


STRATEGIES: List[Tuple[str, Callable[[str], Optional[str]]]] = [
    ("direct", _direct_candidate),
    ("fenced", _fenced_candidate),
    ("braces", _brace_candidate),
]


def recover_json(text: str) -> JSONRecoveryResult:
    """Return the first JSON object any strategy can fully parse.

    Args:
        text: Arbitrary model output expected to contain one JSON object

    Returns:
        Found with the parsed object, or NotFound listing attempted strategies
    """
    clean_text = text.strip()
    attempted: List[str] = []

    for name, find_candidate in STRATEGIES:
        candidate = find_candidate(clean_text)
        if candidate is None:
            continue
        attempted.append(name)
        try:
            value = json.loads(candidate)
        except (ValueError, RecursionError) as exc:
            # also covers the int digit limit and nesting depth
            logger.debug(f"JSON recovery strategy '{name}' failed: {exc}")
            continue
        if not isinstance(value, dict):
            logger.debug(f"JSON recovery strategy '{name}' parsed a non-object, skipping")
            continue
        return Found(value=value, strategy=name)

    return NotFound(attempted=tuple(attempted))


__all__ = ["recover_json", "STRATEGIES"]
