"""Split raw model output into ordered, titled sections."""

from dataclasses import replace
from typing import List, Optional

from .enrichment import enrich_section
from .headers import clean_title, is_header_line
from .models import Section

FALLBACK_SECTION_TITLE = "Main Content"


class SectionSegmenter:
    """
    Walk a document line by line and cut it at detected header lines.

    Each header closes the open section and starts a new one. Text before the
    first header belongs to no section. When no header is found at all, the
    whole text becomes a single fallback section.
    """

    def __init__(self, include_examples: bool = False):
        """
        Initialize SectionSegmenter.

        Args:
            include_examples: Extract usage examples while enriching sections
        """
        self.include_examples = include_examples

    def segment(self, text: str) -> List[Section]:
        """
        Segment text into enriched sections.

        Args:
            text: Raw document text

        Returns:
            Non-empty list of Section objects in first-appearance order
        """
        sections: List[Section] = []
        current_title: Optional[str] = None
        buffer: List[str] = []

        for raw_line in text.split("\n"):
            line = raw_line.rstrip("\r")
            if is_header_line(line):
                if current_title is not None:
                    sections.append(self._close(current_title, buffer))
                current_title = clean_title(line)
                buffer = []
            else:
                buffer.append(line + "\n")

        if current_title is not None:
            sections.append(self._close(current_title, buffer))

        if not sections:
            fallback = enrich_section(FALLBACK_SECTION_TITLE, text, self.include_examples)
            # keep the whole text untrimmed
            sections.append(replace(fallback, content=text))
        return sections

    def _close(self, title: str, buffer: List[str]) -> Section:
        return enrich_section(title, "".join(buffer), self.include_examples)


__all__ = ["SectionSegmenter", "FALLBACK_SECTION_TITLE"]
