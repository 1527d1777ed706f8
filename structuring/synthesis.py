"""Document-wide features derived from the full raw text.

Everything here works on the unsegmented text, so it can run independently of
(or concurrently with) section segmentation. Thresholds are heuristic and
pinned by tests; change them together with the tests.
"""

import math
import re
from dataclasses import dataclass
from typing import List

from .models import ADVANCED, BEGINNER, INTERMEDIATE

MAIN_TOPIC_PLACEHOLDER = "Main topic"
MAX_TAKEAWAYS = 5
MAX_RELATED_TOPICS = 5
RELATED_TOPIC_MAX_CHARS = 50
WORDS_PER_MINUTE = 200

ADVANCED_THRESHOLD = 15
INTERMEDIATE_THRESHOLD = 7

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
TOPIC_MARKER_RE = re.compile(r"^[#*\-\s]+")
BULLET_RE = re.compile(r"^[-*+]\s+(.+)$", re.MULTILINE)
IMPORTANCE_RE = re.compile(
    r"\b(?:important|clave|esencial|essential|fundamental|recordar|remember|key\b)",
    re.IGNORECASE,
)
RELATED_PATTERNS = [
    re.compile(r"\brelacionado con\s+([^.!?]+)", re.IGNORECASE),
    re.compile(r"\btambién\s+([^.!?]+)", re.IGNORECASE),
    re.compile(r"\bsimilar a\s+([^.!?]+)", re.IGNORECASE),
    re.compile(r"\brelated to\s+([^.!?]+)", re.IGNORECASE),
    re.compile(r"\balso\s+([^.!?]+)", re.IGNORECASE),
    re.compile(r"\bsimilar to\s+([^.!?]+)", re.IGNORECASE),
]
LONG_WORD_RE = re.compile(r"\b\w{10,}\b")
TECHNICAL_TERM_RE = re.compile(
    r"\b(?:algoritmo|implementación|arquitectura|optimización|refactoring|debugging"
    r"|algorithm|implementation|architecture|optimization)\b",
    re.IGNORECASE,
)
FENCED_ANY_RE = re.compile(r"```.*?```", re.DOTALL)


@dataclass(frozen=True)
class DocumentFeatures:
    """Document-wide features for one raw text."""

    main_topic: str
    summary: str
    key_takeaways: List[str]
    related_topics: List[str]
    difficulty: str
    estimated_read_time: str


def extract_main_topic(text: str) -> str:
    lines = [line for line in text.split("\n") if line.strip()]
    for line in lines[:3]:
        if 10 < len(line) < 100:
            return TOPIC_MARKER_RE.sub("", line.strip())

    first_sentence = text.split(".")[0]
    if len(first_sentence) > 100:
        return MAIN_TOPIC_PLACEHOLDER
    return first_sentence.strip()


def generate_summary(text: str) -> str:
    """Join the first three sentences longer than 10 characters."""
    sentences = [s.strip() for s in SENTENCE_SPLIT_RE.split(text) if len(s.strip()) > 10]
    return ". ".join(sentences[:3]).strip() + "."


def extract_key_takeaways(text: str) -> List[str]:
    takeaways = [match.group(1) for match in BULLET_RE.finditer(text)]

    for sentence in SENTENCE_SPLIT_RE.split(text):
        if 20 < len(sentence) < 150 and IMPORTANCE_RE.search(sentence):
            takeaways.append(sentence.strip())

    return takeaways[:MAX_TAKEAWAYS]


def extract_related_topics(text: str) -> List[str]:
    topics: List[str] = []
    for pattern in RELATED_PATTERNS:
        for match in pattern.finditer(text):
            topics.append(match.group(1).strip()[:RELATED_TOPIC_MAX_CHARS])
    # dict keeps first-appearance order
    return list(dict.fromkeys(topics))[:MAX_RELATED_TOPICS]


def difficulty_score(text: str) -> int:
    long_words = len(LONG_WORD_RE.findall(text))
    technical_terms = len(TECHNICAL_TERM_RE.findall(text))
    code_blocks = len(FENCED_ANY_RE.findall(text))
    return long_words + technical_terms * 2 + code_blocks * 3


def classify_difficulty(score: int) -> str:
    if score > ADVANCED_THRESHOLD:
        return ADVANCED
    if score > INTERMEDIATE_THRESHOLD:
        return INTERMEDIATE
    return BEGINNER


def estimate_difficulty(text: str) -> str:
    return classify_difficulty(difficulty_score(text))


def format_read_time(minutes: int) -> str:
    """Format whole minutes as "1 minuto", "5 minutos", "1 hora", "1h 30m"."""
    if minutes == 1:
        return "1 minuto"
    if minutes < 60:
        return f"{minutes} minutos"

    hours, remaining = divmod(minutes, 60)
    if hours == 1 and remaining == 0:
        return "1 hora"
    if remaining == 0:
        return f"{hours} horas"
    return f"{hours}h {remaining}m"


def calculate_read_time(text: str) -> str:
    word_count = len(text.split())
    minutes = max(1, math.ceil(word_count / WORDS_PER_MINUTE))
    return format_read_time(minutes)


def synthesize(text: str) -> DocumentFeatures:
    """Compute every document-wide feature for ``text``."""
    return DocumentFeatures(
        main_topic=extract_main_topic(text),
        summary=generate_summary(text),
        key_takeaways=extract_key_takeaways(text),
        related_topics=extract_related_topics(text),
        difficulty=estimate_difficulty(text),
        estimated_read_time=calculate_read_time(text),
    )


__all__ = [
    "DocumentFeatures",
    "extract_main_topic",
    "generate_summary",
    "extract_key_takeaways",
    "extract_related_topics",
    "difficulty_score",
    "classify_difficulty",
    "estimate_difficulty",
    "format_read_time",
    "calculate_read_time",
    "synthesize",
]
