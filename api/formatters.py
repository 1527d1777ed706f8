"""Output formatting for CLI and other callers."""

import json
from typing import Any, Dict, List

from structuring import StructuredContent


class ResponseFormatter:
    """Render results as readable text or JSON."""

    @staticmethod
    def to_json(data: Dict[str, Any]) -> str:
        return json.dumps(data, ensure_ascii=False, indent=2)

    @staticmethod
    def format_structured_text(content: StructuredContent) -> str:
        lines: List[str] = [
            f"# {content.main_topic}",
            "",
            content.summary,
            "",
        ]
        meta = [value for value in (content.difficulty, content.estimated_read_time) if value]
        if meta:
            lines.extend([" | ".join(meta), ""])

        for i, section in enumerate(content.sections, 1):
            lines.append(f"## {i}. {section.title}")
            if section.key_points:
                lines.append("Key points:")
                lines.extend(f"  - {point}" for point in section.key_points)
            for snippet in section.code_snippets:
                lines.append(f"  [code:{snippet.language}] {snippet.code.splitlines()[0] if snippet.code else ''}")
            if section.examples:
                lines.append("Examples:")
                lines.extend(f"  - {example}" for example in section.examples)
            lines.append("")

        if content.key_takeaways:
            lines.append("Key takeaways:")
            lines.extend(f"  * {item}" for item in content.key_takeaways)
        if content.related_topics:
            lines.append("Related topics: " + ", ".join(content.related_topics))
        return "\n".join(lines).rstrip() + "\n"

    @staticmethod
    def format_error(exc: Exception) -> str:
        field = getattr(exc, "field", "")
        if field:
            return f"[error] {field}: {exc}"
        return f"[error] {exc}"


__all__ = ["ResponseFormatter"]
