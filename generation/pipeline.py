"""Generation pipeline: model call followed by structuring or recovery.

This is the only layer that talks to the model collaborator. Everything it
returns is built from the total core operations, so callers never see a
parse failure; collaborator failures become error envelopes or fallback
records.
"""

import re
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from loguru import logger

from recovery import RAG_RECORD_SHAPE, recover_and_normalize
from shared.exceptions import GenerationError
from structuring import Section, StructuredContent, process_content
from structuring.synthesis import extract_main_topic

from .client import LLMClientProtocol
from .models import (
    ErrorInfo,
    PerformanceMetrics,
    RequestMetadata,
    StructuredPrompt,
    StructuredResponse,
)
from .prompts import PromptTemplate
from .scoring import assess_content_quality, calculate_confidence, estimate_tokens

API_VERSION = "2.0.0"
NO_RESPONSE_TEXT = "No response could be generated"
STRUCTURED_ERROR_CODE = "STRUCTURED_GENERATION_ERROR"
STRUCTURED_ERROR_SUGGESTIONS = [
    "Check that the prompt is clear and specific",
    "Try reducing the complexity of the requested content",
    "Review the generation parameters",
]
RAG_ERROR_ANSWER = "The model request failed: {error}"
TITLE_MAX_INPUT_CHARS = 5000
TITLE_MAX_TOKENS = 64

_TITLE_NOISE_RE = re.compile(r"^[#*\s\"'`]+|[*\s\"'`]+$")


def new_request_id() -> str:
    return f"req_{int(time.time() * 1000)}_{uuid.uuid4().hex[:7]}"


def _elapsed(start: float) -> str:
    return f"{int((time.perf_counter() - start) * 1000)}ms"


class GenerationPipeline:
    """Orchestrates prompt building, generation and post-processing.

    Example:
        >>> pipeline = GenerationPipeline(llm_client)
        >>> response = pipeline.structured(StructuredPrompt(prompt="Explain decorators"))
        >>> print(response.structured_content.main_topic)
    """

    def __init__(
        self,
        llm_client: LLMClientProtocol,
        *,
        temperature: float = 0.7,
        max_tokens: int = 2048,
        rag_prompt_template: str = "",
    ):
        """Initialize GenerationPipeline.

        Args:
            llm_client: Model collaborator
            temperature: Default generation temperature
            max_tokens: Default output token limit
            rag_prompt_template: Template with a ``{user_prompt}`` placeholder
        """
        self.llm_client = llm_client
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.rag_prompt_template = rag_prompt_template

    def structured(self, request: StructuredPrompt) -> StructuredResponse:
        """Generate an answer and structure it into sections.

        Args:
            request: Structured generation request

        Returns:
            StructuredResponse; ``success`` is False when the model call failed
        """
        start = time.perf_counter()
        request_id = new_request_id()
        temperature = request.temperature if request.temperature is not None else self.temperature
        max_tokens = request.max_tokens if request.max_tokens is not None else self.max_tokens
        metadata = RequestMetadata(
            request_id=request_id,
            timestamp=datetime.now(timezone.utc).isoformat(),
            version=API_VERSION,
            model=self.llm_client.model_name,
            temperature=temperature,
            max_tokens=max_tokens,
            response_format=request.response_format.value,
            content_type=request.content_type.value,
        )

        logger.info(f"[{request_id}] Processing structured prompt: {request.prompt[:100]}...")
        enhanced_prompt = PromptTemplate.build_enhanced_prompt(request)

        try:
            response = self.llm_client.generate(
                prompt=enhanced_prompt,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except GenerationError as exc:
            logger.error(f"[{request_id}] Error generating structured content: {exc}")
            return self._error_response(exc, metadata, start)

        raw_response = response.content or NO_RESPONSE_TEXT
        content = process_content(raw_response, request.include_examples)

        prompt_tokens = estimate_tokens(enhanced_prompt)
        response_tokens = estimate_tokens(raw_response)
        performance = PerformanceMetrics(
            processing_time=_elapsed(start),
            prompt_tokens=prompt_tokens,
            response_tokens=response_tokens,
            total_tokens=prompt_tokens + response_tokens,
            model_confidence=calculate_confidence(raw_response),
            content_quality=assess_content_quality(content),
        )
        logger.info(f"[{request_id}] Structured content generated in {performance.processing_time}")
        return StructuredResponse(
            success=True,
            raw_response=raw_response,
            structured_content=content,
            performance=performance,
            metadata=metadata,
        )

    def rag_structured(self, user_prompt: str) -> Dict[str, Any]:
        """Generate a RAG record (answer, articles, relationship graph).

        Args:
            user_prompt: User question

        Returns:
            Record dict; a fallback record when generation or recovery fails
        """
        prompt = PromptTemplate.apply_rag_template(self.rag_prompt_template, user_prompt)

        try:
            response = self.llm_client.generate(
                prompt=prompt,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except GenerationError as exc:
            logger.error(f"Error generating structured content with retrieval: {exc}")
            return RAG_RECORD_SHAPE.fallback(RAG_ERROR_ANSWER.format(error=exc))

        if not response.content:
            logger.error("No response text in RAG response")
            return RAG_RECORD_SHAPE.fallback(RAG_ERROR_ANSWER.format(error="empty response"))

        logger.debug(f"RAG structured response: {response.content[:500]}")
        return recover_and_normalize(response.content)

    def generate_title(self, content: str) -> str:
        """Generate a short title for previously generated content.

        Falls back to the detected main topic when the model fails or
        returns nothing usable.
        """
        prompt = PromptTemplate.format_title_prompt(content[:TITLE_MAX_INPUT_CHARS])
        title: Optional[str] = None
        try:
            response = self.llm_client.generate(
                prompt=prompt,
                temperature=0.3,
                max_tokens=TITLE_MAX_TOKENS,
            )
            title = self._clean_title(response.content)
        except GenerationError as exc:
            logger.warning(f"Title generation failed, using main topic: {exc}")

        return title or extract_main_topic(content)

    @staticmethod
    def _clean_title(text: str) -> str:
        for line in text.splitlines():
            cleaned = _TITLE_NOISE_RE.sub("", line)
            if cleaned:
                return cleaned
        return ""

    @staticmethod
    def _error_response(
        exc: GenerationError,
        metadata: RequestMetadata,
        start: float,
    ) -> StructuredResponse:
        performance = PerformanceMetrics(
            processing_time=_elapsed(start),
            prompt_tokens=0,
            response_tokens=0,
            total_tokens=0,
        )
        empty = StructuredContent(
            summary="",
            main_topic="",
            sections=[Section(title="Response", content="")],
            key_takeaways=[],
        )
        return StructuredResponse(
            success=False,
            raw_response="",
            structured_content=empty,
            performance=performance,
            metadata=metadata,
            error=ErrorInfo(
                code=STRUCTURED_ERROR_CODE,
                message=str(exc) or "Structured content generation failed",
                details=repr(exc.cause) if exc.cause is not None else None,
                suggestions=list(STRUCTURED_ERROR_SUGGESTIONS),
            ),
        )


__all__ = ["GenerationPipeline", "new_request_id"]
