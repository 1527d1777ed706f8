"""Generation layer.

Calls the model collaborator and hands its raw text to the structuring and
recovery cores.

Components:
- GeminiLLMClient: LLM client using Google Gemini API
- PromptTemplate: Enhanced, RAG and title prompts
- scoring: Confidence, content quality and token estimates
- GenerationPipeline: Structured, RAG and title generation

Rules:
- MAY import shared, structuring, recovery
- MUST NOT import api
"""

from .client import GeminiLLMClient, LLMClientProtocol
from .models import (
    ContentType,
    ErrorInfo,
    LLMResponse,
    PerformanceMetrics,
    RequestMetadata,
    ResponseFormat,
    StructuredPrompt,
    StructuredResponse,
)
from .pipeline import GenerationPipeline
from .prompts import PromptTemplate
from .scoring import assess_content_quality, calculate_confidence, estimate_tokens

__all__ = [
    # Client
    "GeminiLLMClient",
    "LLMClientProtocol",
    # Models
    "ContentType",
    "ResponseFormat",
    "StructuredPrompt",
    "LLMResponse",
    "PerformanceMetrics",
    "RequestMetadata",
    "ErrorInfo",
    "StructuredResponse",
    # Prompts
    "PromptTemplate",
    # Scoring
    "estimate_tokens",
    "calculate_confidence",
    "assess_content_quality",
    # Pipeline
    "GenerationPipeline",
]
