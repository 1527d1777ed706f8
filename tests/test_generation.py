"""Tests for prompts, scoring and the generation pipeline."""

import json

import pytest

from generation import (
    ContentType,
    GenerationPipeline,
    PromptTemplate,
    ResponseFormat,
    StructuredPrompt,
    assess_content_quality,
    calculate_confidence,
    estimate_tokens,
)
from generation.pipeline import NO_RESPONSE_TEXT, STRUCTURED_ERROR_CODE
from generation.prompts import CONTENT_INSTRUCTIONS, EXAMPLES_INSTRUCTION, FORMAT_INSTRUCTIONS
from shared.exceptions import GenerationError
from structuring import fallback_content, process_content

STRUCTURED_ANSWER = """# Decorators
a decorator wraps a function and returns a new callable that adds behaviour.

## Usage
```python
@cache
def f():
    pass
```
"""

RAG_JSON = json.dumps(
    {
        "answer": "Mars has water ice.",
        "related_articles": [{"title": "Ice", "year": 2024, "authors": [], "tags": []}],
        "relationship_graph": {"nodes": [{"id": "ice", "name": "Ice", "group": "Geo"}], "links": []},
    }
)


class TestPromptTemplate:
    def test_enhanced_prompt_with_context(self):
        request = StructuredPrompt(prompt="What is X?", context="Physics class")
        prompt = PromptTemplate.build_enhanced_prompt(request)

        assert prompt.startswith("Context: Physics class\n\nQuestion: What is X?")
        assert CONTENT_INSTRUCTIONS[ContentType.EXPLANATION] in prompt
        assert FORMAT_INSTRUCTIONS[ResponseFormat.STRUCTURED] in prompt

    def test_examples_instruction_added(self):
        request = StructuredPrompt(
            prompt="Teach me",
            content_type=ContentType.TUTORIAL,
            response_format=ResponseFormat.MARKDOWN,
            include_examples=True,
        )
        prompt = PromptTemplate.build_enhanced_prompt(request)

        assert prompt.startswith("Teach me\n\n")
        assert CONTENT_INSTRUCTIONS[ContentType.TUTORIAL] in prompt
        assert prompt.endswith(EXAMPLES_INSTRUCTION)

    def test_rag_template(self):
        assert PromptTemplate.apply_rag_template("", "q") == "q"
        assert PromptTemplate.apply_rag_template("Answer as JSON: {user_prompt}", "q") == "Answer as JSON: q"


class TestScoring:
    def test_estimate_tokens(self):
        assert estimate_tokens("") == 0
        assert estimate_tokens("abcd") == 1
        assert estimate_tokens("abcde") == 2

    def test_short_plain_response_low_confidence(self):
        assert calculate_confidence("short") == 0.3

    def test_rich_response_clamped(self):
        text = "# Title\n\n1. step\n\nfor example\n```\ncode\n```\n" + "x" * 600
        assert calculate_confidence(text) == 1.0

    def test_quality_of_minimal_content(self):
        assert assess_content_quality(fallback_content("x")) == 0.5

    def test_quality_rewards_sections_and_code(self):
        content = process_content(STRUCTURED_ANSWER)
        assert assess_content_quality(content) > 0.5


class TestGenerationPipeline:
    def test_structured_success(self, fake_llm):
        client = fake_llm(content=STRUCTURED_ANSWER)
        pipeline = GenerationPipeline(client, temperature=0.5, max_tokens=512)

        response = pipeline.structured(StructuredPrompt(prompt="Explain decorators"))

        assert response.success
        assert response.error is None
        assert [s.title for s in response.structured_content.sections] == ["Decorators", "Usage"]
        assert response.metadata.model == "fake-model"
        assert response.metadata.temperature == 0.5
        assert response.metadata.request_id.startswith("req_")
        assert response.performance.total_tokens == (
            response.performance.prompt_tokens + response.performance.response_tokens
        )
        assert client.calls[0]["max_tokens"] == 512
        assert "Explain decorators" in client.calls[0]["prompt"]

    def test_request_overrides_defaults(self, fake_llm):
        client = fake_llm(content="ok")
        pipeline = GenerationPipeline(client)

        pipeline.structured(StructuredPrompt(prompt="p", temperature=0.2, max_tokens=100))

        assert client.calls[0]["temperature"] == 0.2
        assert client.calls[0]["max_tokens"] == 100

    def test_empty_model_text_uses_placeholder(self, fake_llm):
        response = GenerationPipeline(fake_llm(content="")).structured(StructuredPrompt(prompt="p"))
        assert response.raw_response == NO_RESPONSE_TEXT
        assert len(response.structured_content.sections) == 1

    def test_structured_generation_error(self, fake_llm):
        client = fake_llm(error=GenerationError("quota exceeded", model="fake-model"))
        response = GenerationPipeline(client).structured(StructuredPrompt(prompt="p"))

        assert not response.success
        assert response.error.code == STRUCTURED_ERROR_CODE
        assert response.error.message == "quota exceeded"
        assert len(response.error.suggestions) == 3
        assert response.performance.total_tokens == 0
        assert response.to_dict()["error"]["code"] == STRUCTURED_ERROR_CODE

    def test_rag_structured_applies_template(self, fake_llm):
        client = fake_llm(content="Here you go:\n```json\n" + RAG_JSON + "\n```")
        pipeline = GenerationPipeline(client, rag_prompt_template="Answer as JSON: {user_prompt}")

        record = pipeline.rag_structured("Is there water on Mars?")

        assert client.calls[0]["prompt"] == "Answer as JSON: Is there water on Mars?"
        assert record == json.loads(RAG_JSON)

    def test_rag_structured_model_failure(self, fake_llm):
        client = fake_llm(error=GenerationError("network down"))
        record = GenerationPipeline(client).rag_structured("q")

        assert "network down" in record["answer"]
        assert record["related_articles"] == []
        assert record["relationship_graph"] == {"nodes": [], "links": []}

    def test_rag_structured_prose_falls_back_to_text(self, fake_llm):
        record = GenerationPipeline(fake_llm(content="just prose")).rag_structured("q")
        assert record["answer"] == "just prose"

    @pytest.mark.parametrize(
        "model_text, expected",
        [
            ('"Decorators in Python"', "Decorators in Python"),
            ("# Decorators Explained\n", "Decorators Explained"),
            ("\n**Bold Title**", "Bold Title"),
        ],
    )
    def test_generate_title_cleans_output(self, fake_llm, model_text, expected):
        assert GenerationPipeline(fake_llm(content=model_text)).generate_title("content") == expected

    def test_generate_title_falls_back_to_main_topic(self, fake_llm):
        client = fake_llm(error=GenerationError("boom"))
        title = GenerationPipeline(client).generate_title("# Photosynthesis Basics\nplants use light.")
        assert title == "Photosynthesis Basics"
