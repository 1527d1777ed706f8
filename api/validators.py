"""Request validation for the API layer."""

from typing import Optional

from generation import ContentType, ResponseFormat
from shared.exceptions import SharedError

MAX_TITLE_INPUT_CHARS = 5000
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0
MIN_MAX_TOKENS = 1
MAX_MAX_TOKENS = 8192


class ValidationError(SharedError):
    """Raised when a request fails validation.

    Attributes:
        field: Name of the offending field
    """

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field


class RequestValidator:
    """Static checks applied before any model call."""

    @staticmethod
    def validate_prompt(prompt: Optional[str]) -> str:
        if prompt is None or not prompt.strip():
            raise ValidationError("Prompt must not be empty", field="prompt")
        return prompt.strip()

    @staticmethod
    def validate_title_input(text: Optional[str]) -> str:
        if text is None or not text.strip():
            raise ValidationError("Response text must not be empty", field="response")
        if len(text) > MAX_TITLE_INPUT_CHARS:
            raise ValidationError(
                f"Response text must not exceed {MAX_TITLE_INPUT_CHARS} characters",
                field="response",
            )
        return text

    @staticmethod
    def validate_temperature(value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        if not MIN_TEMPERATURE <= value <= MAX_TEMPERATURE:
            raise ValidationError(
                f"Temperature must be between {MIN_TEMPERATURE} and {MAX_TEMPERATURE}",
                field="temperature",
            )
        return value

    @staticmethod
    def validate_max_tokens(value: Optional[int]) -> Optional[int]:
        if value is None:
            return None
        if not MIN_MAX_TOKENS <= value <= MAX_MAX_TOKENS:
            raise ValidationError(
                f"max_tokens must be between {MIN_MAX_TOKENS} and {MAX_MAX_TOKENS}",
                field="max_tokens",
            )
        return value

    @staticmethod
    def validate_content_type(value: str) -> ContentType:
        try:
            return ContentType(value)
        except ValueError:
            allowed = ", ".join(item.value for item in ContentType)
            raise ValidationError(f"content type must be one of: {allowed}", field="content_type")

    @staticmethod
    def validate_response_format(value: str) -> ResponseFormat:
        try:
            return ResponseFormat(value)
        except ValueError:
            allowed = ", ".join(item.value for item in ResponseFormat)
            raise ValidationError(f"response format must be one of: {allowed}", field="response_format")


__all__ = ["RequestValidator", "ValidationError"]
