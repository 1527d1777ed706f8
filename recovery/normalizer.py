"""Shape validation for recovered JSON with a total fallback path."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from loguru import logger

from .extractor import recover_json
from .models import (
    Accepted,
    Fallback,
    Found,
    JSONRecoveryResult,
    NormalizationResult,
    RagRecord,
)

RECOVERY_ERROR_ANSWER = "The structured response could not be recovered: {error}"


@dataclass(frozen=True)
class RecordShape:
    """Target record type for normalization.

    Attributes:
        name: Human-readable record name for logs
        required_keys: Top-level keys that must be present and non-null
        fallback: Builds a safe record from the answer text
    """

    name: str
    required_keys: Tuple[str, ...]
    fallback: Callable[[str], Dict[str, Any]]


def _rag_fallback(answer: str) -> Dict[str, Any]:
    return RagRecord(answer=answer, research_gaps=[]).to_dict()


RAG_RECORD_SHAPE = RecordShape(
    name="rag_record",
    required_keys=("answer", "related_articles", "relationship_graph"),
    fallback=_rag_fallback,
)


def normalize(
    result: JSONRecoveryResult,
    raw_text: str,
    shape: RecordShape = RAG_RECORD_SHAPE,
) -> NormalizationResult:
    """Accept a recovered object matching ``shape`` or synthesize a fallback.

    Args:
        result: Outcome of JSON recovery
        raw_text: Original model output, used as the fallback answer
        shape: Target record shape

    Returns:
        Accepted with the value unchanged, or Fallback with a reason
    """
    if not isinstance(result, Found):
        reason = f"no JSON object found (tried: {', '.join(result.attempted) or 'none'})"
    elif not isinstance(result.value, dict):
        reason = "recovered value is not an object"
    else:
        missing = [key for key in shape.required_keys if result.value.get(key) is None]
        if not missing:
            return Accepted(record=result.value)
        reason = f"missing required keys: {', '.join(missing)}"

    logger.warning(f"Invalid {shape.name} response, returning fallback: {reason}")
    return Fallback(record=shape.fallback(raw_text), reason=reason)


def recover_and_normalize(raw_text: str, shape: RecordShape = RAG_RECORD_SHAPE) -> Dict[str, Any]:
    """Recover a record from raw model output. Never raises.

    Args:
        raw_text: Text produced by the generative model
        shape: Target record shape

    Returns:
        Record dict carrying every required key of ``shape``
    """
    try:
        result = recover_json(raw_text)
    except Exception as exc:
        logger.warning(f"Could not parse {shape.name} JSON response: {exc}")
        return shape.fallback(RECOVERY_ERROR_ANSWER.format(error=exc))
    return normalize(result, raw_text, shape).record


__all__ = ["RecordShape", "RAG_RECORD_SHAPE", "normalize", "recover_and_normalize"]
