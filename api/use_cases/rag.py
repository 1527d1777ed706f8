"""Generation use case orchestration.

Rules:
- MAY import generation, shared
- MUST NOT implement structuring or recovery logic directly
"""

from typing import Any, Dict, Optional

from generation import (
    GeminiLLMClient,
    GenerationPipeline,
    LLMClientProtocol,
    StructuredPrompt,
    StructuredResponse,
)
from shared.config import GenerationConfig


class RAGUseCase:
    """Orchestrates model-backed generation.

    Pipeline:
    1. Build prompt (generation layer)
    2. Call the model collaborator
    3. Structure the answer or recover the RAG record

    Example:
        >>> use_case = RAGUseCase(gen_config)
        >>> response = use_case.ask(StructuredPrompt(prompt="Explain decorators"))
        >>> record = use_case.rag("Latest findings on Mars exploration?")
    """

    def __init__(
        self,
        gen_config: GenerationConfig,
        llm_client: Optional[LLMClientProtocol] = None,
    ):
        """Initialize RAGUseCase.

        Args:
            gen_config: Generation configuration
            llm_client: Model collaborator (defaults to GeminiLLMClient)
        """
        if llm_client is None:
            llm_client = GeminiLLMClient(
                model=gen_config.llm_model,
                top_p=gen_config.top_p,
                top_k=gen_config.top_k,
            )
        self.llm_client = llm_client
        self.pipeline = GenerationPipeline(
            llm_client,
            temperature=gen_config.temperature,
            max_tokens=gen_config.max_tokens,
            rag_prompt_template=gen_config.rag_prompt_template,
        )
        self.gen_config = gen_config

    def ask(self, request: StructuredPrompt) -> StructuredResponse:
        return self.pipeline.structured(request)

    def rag(self, prompt: str) -> Dict[str, Any]:
        return self.pipeline.rag_structured(prompt)

    def title(self, content: str) -> str:
        return self.pipeline.generate_title(content)


__all__ = ["RAGUseCase"]
