"""Structuring layer: heuristic document structuring of model output.

Components:
- headers: Header classifier (is this line a section title?)
- SectionSegmenter: Line walk producing ordered sections
- enrichment: Key points, code snippets and examples per section
- synthesis: Document-wide topic, summary, takeaways, difficulty, read time
- process_content: Total entry point with a blanket fallback

Rules:
- Pure functions over an immutable string; no I/O, no configuration reads
- MUST NOT import generation, recovery or api
"""

from .enrichment import enrich_section, extract_code_snippets, extract_examples, extract_key_points
from .headers import clean_title, is_header_line
from .models import CodeSnippet, Section, StructuredContent
from .processor import fallback_content, process_content
from .segmentation import SectionSegmenter
from .synthesis import DocumentFeatures, synthesize

__all__ = [
    # Models
    "CodeSnippet",
    "Section",
    "StructuredContent",
    "DocumentFeatures",
    # Classification / segmentation
    "is_header_line",
    "clean_title",
    "SectionSegmenter",
    # Enrichment
    "enrich_section",
    "extract_key_points",
    "extract_code_snippets",
    "extract_examples",
    # Synthesis
    "synthesize",
    # Entry point
    "process_content",
    "fallback_content",
]
