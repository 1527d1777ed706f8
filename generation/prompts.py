"""Prompt construction for structured and RAG generation."""

from typing import Dict

from .models import ContentType, ResponseFormat, StructuredPrompt

CONTENT_INSTRUCTIONS: Dict[ContentType, str] = {
    ContentType.EXPLANATION: (
        "Provide a clear and detailed explanation. Organize the information "
        "logically with an introduction, development and conclusion."
    ),
    ContentType.LIST: "Present the information as a structured list with clear, concise items.",
    ContentType.TUTORIAL: "Write a step-by-step tutorial with clear, progressive instructions.",
    ContentType.CODE: "Include well-commented code examples and precise technical explanations.",
    ContentType.CREATIVE: "Use your creativity to produce original and engaging content.",
    ContentType.ANALYSIS: "Perform an in-depth analysis with critical evaluation and well-founded conclusions.",
    ContentType.QUESTION_ANSWER: "Answer directly and completely, covering every aspect of the question.",
}

FORMAT_INSTRUCTIONS: Dict[ResponseFormat, str] = {
    ResponseFormat.STRUCTURED: (
        "Structure your answer with clear titles and subtitles. Use markdown formatting for readability."
    ),
    ResponseFormat.JSON: "Where appropriate, include structured data as valid JSON.",
    ResponseFormat.MARKDOWN: (
        "Use full markdown formatting with titles, lists, links and code formatting where needed."
    ),
    ResponseFormat.TEXT: "Present the information as well-organized plain text.",
}

EXAMPLES_INSTRUCTION = " Include practical examples and use cases where relevant."

USER_PROMPT_PLACEHOLDER = "{user_prompt}"

TITLE_PROMPT = """Write a concise, descriptive title (at most 12 words) for the following content.
Return only the title, without quotes or formatting.

Content:
{content}
"""


class PromptTemplate:
    """Builds prompts sent to the generation collaborator."""

    @staticmethod
    def content_instructions(content_type: ContentType) -> str:
        return CONTENT_INSTRUCTIONS.get(content_type, CONTENT_INSTRUCTIONS[ContentType.EXPLANATION])

    @staticmethod
    def format_instructions(response_format: ResponseFormat, include_examples: bool = False) -> str:
        instructions = FORMAT_INSTRUCTIONS.get(response_format, "")
        if include_examples:
            instructions += EXAMPLES_INSTRUCTION
        return instructions

    @classmethod
    def build_enhanced_prompt(cls, request: StructuredPrompt) -> str:
        """Wrap the user prompt with context, content and format instructions.

        Args:
            request: Structured generation request

        Returns:
            Prompt text ready for the model
        """
        prompt = request.prompt
        if request.context:
            prompt = f"Context: {request.context}\n\nQuestion: {prompt}"

        content = cls.content_instructions(request.content_type)
        layout = cls.format_instructions(request.response_format, request.include_examples)
        return f"{prompt}\n\n{content}\n\n{layout}"

    @staticmethod
    def apply_rag_template(template: str, user_prompt: str) -> str:
        """Substitute ``{user_prompt}`` in a configured template.

        An empty template leaves the prompt untouched.
        """
        if not template:
            return user_prompt
        return template.replace(USER_PROMPT_PLACEHOLDER, user_prompt, 1)

    @staticmethod
    def format_title_prompt(content: str) -> str:
        return TITLE_PROMPT.format(content=content)


__all__ = ["PromptTemplate", "CONTENT_INSTRUCTIONS", "FORMAT_INSTRUCTIONS"]
