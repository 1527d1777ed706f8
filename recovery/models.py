"""Data models for JSON recovery and record normalization.

``StructuredArticle``, ``GraphNode``, ``GraphLink``, ``RelationshipGraph`` and
``ResearchGap`` document the wire shape of a RAG record. Accepted records stay
plain dicts and are never rebuilt from these classes; ``RagRecord`` only
builds the fallback record.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class Found:
    """A JSON object that passed a full parse.

    Attributes:
        value: Parsed JSON object
        strategy: Name of the strategy that produced it
    """

    value: Any
    strategy: str


@dataclass(frozen=True)
class NotFound:
    """No strategy produced a valid JSON object."""

    attempted: Tuple[str, ...] = ()


JSONRecoveryResult = Union[Found, NotFound]


@dataclass
class StructuredArticle:
    title: str
    year: int
    authors: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)


@dataclass
class GraphNode:
    id: str
    name: str
    group: str


@dataclass
class GraphLink:
    source: str  # node id
    target: str  # node id
    value: float


@dataclass
class RelationshipGraph:
    nodes: List[GraphNode] = field(default_factory=list)
    links: List[GraphLink] = field(default_factory=list)


@dataclass
class ResearchGap:
    topic: str
    description: str


@dataclass
class RagRecord:
    """Answer plus article list and relationship graph for the graph UI.

    Attributes:
        answer: Generated answer text
        related_articles: Articles referenced by the answer
        relationship_graph: Nodes and weighted links between them
        research_gaps: Optional under-explored topics
    """

    answer: str
    related_articles: List[StructuredArticle] = field(default_factory=list)
    relationship_graph: RelationshipGraph = field(default_factory=RelationshipGraph)
    research_gaps: Optional[List[ResearchGap]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "answer": self.answer,
            "related_articles": [vars(article).copy() for article in self.related_articles],
            "relationship_graph": {
                "nodes": [vars(node).copy() for node in self.relationship_graph.nodes],
                "links": [vars(link).copy() for link in self.relationship_graph.links],
            },
        }
        if self.research_gaps is not None:
            data["research_gaps"] = [vars(gap).copy() for gap in self.research_gaps]
        return data


@dataclass(frozen=True)
class Accepted:
    """Recovered value matched the target shape and is returned unchanged."""

    record: Dict[str, Any]


@dataclass(frozen=True)
class Fallback:
    """Recovered value was missing or malformed; ``record`` is synthesized."""

    record: Dict[str, Any]
    reason: str


NormalizationResult = Union[Accepted, Fallback]


__all__ = [
    "Found",
    "NotFound",
    "JSONRecoveryResult",
    "StructuredArticle",
    "GraphNode",
    "GraphLink",
    "RelationshipGraph",
    "ResearchGap",
    "RagRecord",
    "Accepted",
    "Fallback",
    "NormalizationResult",
]
