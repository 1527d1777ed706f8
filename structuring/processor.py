"""Top-level structuring entry point."""

from loguru import logger

from .models import Section, StructuredContent
from .segmentation import SectionSegmenter
from .synthesis import synthesize

FALLBACK_MAIN_TOPIC = "Generated content"
FALLBACK_SECTION_TITLE = "Response"
FALLBACK_SUMMARY_CHARS = 200


def fallback_content(raw_text: str) -> StructuredContent:
    """Minimal valid structure holding the raw text verbatim."""
    return StructuredContent(
        summary=raw_text[:FALLBACK_SUMMARY_CHARS] + "...",
        main_topic=FALLBACK_MAIN_TOPIC,
        sections=[Section(title=FALLBACK_SECTION_TITLE, content=raw_text)],
        key_takeaways=[],
    )


def process_content(raw_text: str, include_examples: bool = False) -> StructuredContent:
    """Turn raw model output into a StructuredContent. Never raises.

    Args:
        raw_text: Text produced by the generative model
        include_examples: Extract usage examples per section

    Returns:
        StructuredContent with at least one section
    """
    try:
        sections = SectionSegmenter(include_examples=include_examples).segment(raw_text)
        features = synthesize(raw_text)
        return StructuredContent(
            summary=features.summary,
            main_topic=features.main_topic,
            sections=sections,
            key_takeaways=features.key_takeaways,
            related_topics=features.related_topics,
            difficulty=features.difficulty,
            estimated_read_time=features.estimated_read_time,
        )
    except Exception:
        logger.exception("Error processing content, returning fallback structure")
        return fallback_content(raw_text)


__all__ = ["process_content", "fallback_content"]
