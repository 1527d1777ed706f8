"""LLM client abstraction for generation layer.

The structuring core never calls a model itself; this module provides the
``generate(prompt) -> text`` collaborator used by the pipeline.
"""

import os
from typing import Optional, Protocol

from loguru import logger

from shared.config import DEFAULT_LLM_MODEL
from shared.exceptions import ConfigError, GenerationError

from .models import LLMResponse


class LLMClientProtocol(Protocol):
    """Protocol for LLM clients (dependency inversion)."""

    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ) -> LLMResponse:
        """Generate response from prompt."""
        ...

    @property
    def model_name(self) -> str:
        ...


class GeminiLLMClient:
    """Gemini LLM client using google-generativeai.

    Example:
        >>> client = GeminiLLMClient()
        >>> response = client.generate("Explain Python decorators")
        >>> print(response.content)
    """

    def __init__(
        self,
        model: str = DEFAULT_LLM_MODEL,
        api_key: Optional[str] = None,
        top_p: float = 0.8,
        top_k: int = 40,
    ):
        """Initialize Gemini LLM client.

        Args:
            model: Gemini model to use
            api_key: Google API key (falls back to GOOGLE_API_KEY env var)
            top_p: Nucleus sampling parameter
            top_k: Top-k sampling parameter
        """
        import google.generativeai as genai

        key = api_key or os.getenv("GOOGLE_API_KEY")
        if not key:
            raise ConfigError("GOOGLE_API_KEY is required for Gemini LLM")

        genai.configure(api_key=key)
        self._model = genai.GenerativeModel(model)
        self._model_name = model
        self._top_p = top_p
        self._top_k = top_k

    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ) -> LLMResponse:
        """Generate response using Gemini.

        Args:
            prompt: User prompt
            system_prompt: Optional system instruction
            temperature: Generation temperature (0-2)
            max_tokens: Maximum output tokens

        Returns:
            LLMResponse with generated content

        Raises:
            GenerationError: If the provider call fails
        """
        full_prompt = prompt
        if system_prompt:
            full_prompt = f"{system_prompt}\n\n{prompt}"

        generation_config = {
            "temperature": temperature,
            "max_output_tokens": max_tokens,
            "top_p": self._top_p,
            "top_k": self._top_k,
        }

        try:
            response = self._model.generate_content(
                full_prompt,
                generation_config=generation_config,
            )
        except Exception as e:
            logger.error(f"[llm] Generation failed: {e}")
            raise GenerationError(str(e), model=self._model_name, cause=e) from e

        # Blocked or empty responses
        if not response.candidates:
            raise GenerationError("Model returned no candidates", model=self._model_name)

        try:
            text = response.text
        except ValueError as e:
            # raised by the SDK when the candidate has no text parts
            raise GenerationError(str(e), model=self._model_name, cause=e) from e

        return LLMResponse(
            content=text.strip(),
            model=self._model_name,
            usage=None,  # Gemini doesn't expose token usage easily
        )

    @property
    def model_name(self) -> str:
        """Get the model name."""
        return self._model_name


__all__ = ["LLMClientProtocol", "GeminiLLMClient", "LLMResponse"]
