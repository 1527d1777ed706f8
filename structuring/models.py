"""Data models for the structuring layer.

All models are frozen once built. Freezing is shallow: list fields are not
copied, and callers must not mutate them. ``to_dict`` renders the camelCase wire shape
consumed by the rendering front end; absent optional fields are omitted.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

BEGINNER = "beginner"
INTERMEDIATE = "intermediate"
ADVANCED = "advanced"

DIFFICULTY_TIERS = (BEGINNER, INTERMEDIATE, ADVANCED)


@dataclass(frozen=True)
class CodeSnippet:
    """Code captured from a section.

    Attributes:
        language: Fence language tag ("text" when omitted)
        code: Verbatim code, whitespace-trimmed only
        description: Short label for the snippet kind
        filename: Optional file name hint
    """

    language: str
    code: str
    description: Optional[str] = None
    filename: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"language": self.language, "code": self.code}
        if self.description is not None:
            data["description"] = self.description
        if self.filename is not None:
            data["filename"] = self.filename
        return data


@dataclass(frozen=True)
class Section:
    """A titled, contiguous span of a document."""

    title: str
    content: str
    key_points: List[str] = field(default_factory=list)
    code_snippets: List[CodeSnippet] = field(default_factory=list)
    examples: Optional[List[str]] = None
    subsections: Optional[List["Section"]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "title": self.title,
            "content": self.content,
            "keyPoints": list(self.key_points),
            "codeSnippets": [snippet.to_dict() for snippet in self.code_snippets],
        }
        if self.examples is not None:
            data["examples"] = list(self.examples)
        if self.subsections is not None:
            data["subsections"] = [sub.to_dict() for sub in self.subsections]
        return data


@dataclass(frozen=True)
class StructuredContent:
    """Document-level result of structuring one raw text.

    Attributes:
        summary: First sentences of the text
        main_topic: Detected title or topic line
        sections: Ordered, non-empty list of sections
        key_takeaways: Up to 5 highlighted points
        related_topics: Up to 5 deduplicated related topics
        difficulty: beginner / intermediate / advanced
        estimated_read_time: Human-readable read time
    """

    summary: str
    main_topic: str
    sections: List[Section]
    key_takeaways: List[str] = field(default_factory=list)
    related_topics: Optional[List[str]] = None
    difficulty: Optional[str] = None
    estimated_read_time: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "summary": self.summary,
            "mainTopic": self.main_topic,
            "sections": [section.to_dict() for section in self.sections],
            "keyTakeaways": list(self.key_takeaways),
        }
        if self.related_topics is not None:
            data["relatedTopics"] = list(self.related_topics)
        if self.difficulty is not None:
            data["difficulty"] = self.difficulty
        if self.estimated_read_time is not None:
            data["estimatedReadTime"] = self.estimated_read_time
        return data


__all__ = [
    "CodeSnippet",
    "Section",
    "StructuredContent",
    "BEGINNER",
    "INTERMEDIATE",
    "ADVANCED",
    "DIFFICULTY_TIERS",
]
