"""Data models for generation layer.

Contains request options, LLM responses and the structured response envelope.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from structuring import StructuredContent


class ContentType(str, Enum):
    EXPLANATION = "explanation"
    LIST = "list"
    TUTORIAL = "tutorial"
    CODE = "code"
    CREATIVE = "creative"
    ANALYSIS = "analysis"
    QUESTION_ANSWER = "question_answer"


class ResponseFormat(str, Enum):
    TEXT = "text"
    STRUCTURED = "structured"
    JSON = "json"
    MARKDOWN = "markdown"


@dataclass
class StructuredPrompt:
    """Options for a structured generation request.

    Attributes:
        prompt: User prompt
        response_format: Requested output layout
        content_type: Kind of content to produce
        include_examples: Ask for and extract usage examples
        temperature: Optional override of the configured temperature
        max_tokens: Optional override of the configured token limit
        context: Optional background prepended to the prompt
    """

    prompt: str
    response_format: ResponseFormat = ResponseFormat.STRUCTURED
    content_type: ContentType = ContentType.EXPLANATION
    include_examples: bool = False
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    context: Optional[str] = None


@dataclass
class LLMResponse:
    """Response from LLM generation.

    Attributes:
        content: Generated text content
        model: Model name used for generation
        usage: Optional token usage information
    """

    content: str
    model: str
    usage: Optional[dict] = None


@dataclass
class PerformanceMetrics:
    processing_time: str
    prompt_tokens: int
    response_tokens: int
    total_tokens: int
    model_confidence: Optional[float] = None
    content_quality: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "processingTime": self.processing_time,
            "promptTokens": self.prompt_tokens,
            "responseTokens": self.response_tokens,
            "totalTokens": self.total_tokens,
        }
        if self.model_confidence is not None:
            data["modelConfidence"] = self.model_confidence
        if self.content_quality is not None:
            data["contentQuality"] = self.content_quality
        return data


@dataclass
class RequestMetadata:
    request_id: str
    timestamp: str
    version: str
    model: str
    temperature: float
    max_tokens: int
    response_format: str
    content_type: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "requestId": self.request_id,
            "timestamp": self.timestamp,
            "version": self.version,
            "model": self.model,
            "temperature": self.temperature,
            "maxTokens": self.max_tokens,
            "responseFormat": self.response_format,
            "contentType": self.content_type,
        }


@dataclass
class ErrorInfo:
    code: str
    message: str
    details: Optional[str] = None
    suggestions: List[str] = field(default_factory=list)


@dataclass
class StructuredResponse:
    """Envelope returned by structured generation.

    Attributes:
        success: Whether generation succeeded
        raw_response: Model text as received
        structured_content: Structuring result for ``raw_response``
        performance: Timing and token estimates
        metadata: Request echo
        error: Populated when ``success`` is False
    """

    success: bool
    raw_response: str
    structured_content: StructuredContent
    performance: PerformanceMetrics
    metadata: RequestMetadata
    error: Optional[ErrorInfo] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "success": self.success,
            "data": {
                "rawResponse": self.raw_response,
                "structuredContent": self.structured_content.to_dict(),
                "performance": self.performance.to_dict(),
            },
            "metadata": self.metadata.to_dict(),
        }
        if self.error is not None:
            data["error"] = {
                "code": self.error.code,
                "message": self.error.message,
                "details": self.error.details,
                "suggestions": list(self.error.suggestions),
            }
        return data


__all__ = [
    "ContentType",
    "ResponseFormat",
    "StructuredPrompt",
    "LLMResponse",
    "PerformanceMetrics",
    "RequestMetadata",
    "ErrorInfo",
    "StructuredResponse",
]
