"""Offline use cases over already-generated model text.

No model call is made here; these wrap the two total core operations.
"""

from typing import Any, Dict

from recovery import recover_and_normalize
from structuring import StructuredContent, process_content


class StructureUseCase:
    """Structure or recover text produced earlier by a model.

    Example:
        >>> use_case = StructureUseCase()
        >>> content = use_case.structure(raw_text, include_examples=True)
        >>> record = use_case.recover(raw_json_text)
    """

    def structure(self, raw_text: str, include_examples: bool = False) -> StructuredContent:
        return process_content(raw_text, include_examples)

    def recover(self, raw_text: str) -> Dict[str, Any]:
        return recover_and_normalize(raw_text)


__all__ = ["StructureUseCase"]
