"""Shared fixtures: an in-memory model collaborator."""

from typing import List, Optional

import pytest

from generation import LLMResponse
from shared.config import GenerationConfig


class FakeLLMClient:
    """Records prompts and returns canned content (or raises)."""

    def __init__(self, content: str = "", error: Optional[Exception] = None, model: str = "fake-model"):
        self.content = content
        self.error = error
        self.calls: List[dict] = []
        self._model = model

    def generate(self, prompt, system_prompt=None, temperature=0.7, max_tokens=2048):
        self.calls.append(
            {
                "prompt": prompt,
                "system_prompt": system_prompt,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, model=self._model)

    @property
    def model_name(self) -> str:
        return self._model


@pytest.fixture
def fake_llm():
    return FakeLLMClient


@pytest.fixture
def gen_config():
    return GenerationConfig(
        llm_model="fake-model",
        temperature=0.7,
        max_tokens=2048,
        top_p=0.8,
        top_k=40,
        rag_prompt_template="",
        log_level="INFO",
    )
