"""Recovery layer: resilient JSON extraction and record normalization.

Components:
- recover_json: Ordered extraction strategies returning Found / NotFound
- normalize: Shape check with a synthesized fallback record
- recover_and_normalize: Total entry point combining both

Rules:
- Pure functions; no I/O, no configuration reads
- MUST NOT import generation or api
"""

from .extractor import recover_json
from .models import (
    Accepted,
    Fallback,
    Found,
    GraphLink,
    GraphNode,
    JSONRecoveryResult,
    NormalizationResult,
    NotFound,
    RagRecord,
    RelationshipGraph,
    ResearchGap,
    StructuredArticle,
)
from .normalizer import RAG_RECORD_SHAPE, RecordShape, normalize, recover_and_normalize

__all__ = [
    # Results
    "Found",
    "NotFound",
    "JSONRecoveryResult",
    "Accepted",
    "Fallback",
    "NormalizationResult",
    # Records
    "StructuredArticle",
    "GraphNode",
    "GraphLink",
    "RelationshipGraph",
    "ResearchGap",
    "RagRecord",
    # Operations
    "recover_json",
    "RecordShape",
    "RAG_RECORD_SHAPE",
    "normalize",
    "recover_and_normalize",
]
