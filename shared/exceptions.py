"""Exception hierarchy shared across layers."""

from typing import Optional


class SharedError(Exception):
    """Base class for errors raised outside the structuring core."""


class ConfigError(SharedError):
    """Raised when required configuration is missing or invalid."""


class GenerationError(SharedError):
    """Raised when the model collaborator fails to produce text.

    Attributes:
        model: Model name used for the failed call
        cause: Underlying provider exception, if any
    """

    def __init__(self, message: str, model: str = "", cause: Optional[BaseException] = None):
        super().__init__(message)
        self.model = model
        self.cause = cause


__all__ = ["SharedError", "ConfigError", "GenerationError"]
