import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


DEFAULT_LLM_MODEL = "gemini-2.0-flash"


@dataclass
class GenerationConfig:
    """Configuration for the generation layer and CLI."""

    llm_model: str
    temperature: float
    max_tokens: int
    top_p: float
    top_k: int
    rag_prompt_template: str
    log_level: str
    log_file: Optional[str] = None


def _parse_int(value: Optional[str], default: int = 0) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _parse_float(value: Optional[str], default: float = 0.0) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _parse_optional_str(value: Optional[str]) -> Optional[str]:
    if value is None or value.strip() == "":
        return None
    return value.strip()


def load_config() -> GenerationConfig:
    """Load configuration from environment variables."""
    load_dotenv()

    config = GenerationConfig(
        llm_model=os.getenv("GEMINI_MODEL", DEFAULT_LLM_MODEL),
        temperature=_parse_float(os.getenv("LLM_TEMPERATURE"), 0.7),
        max_tokens=_parse_int(os.getenv("LLM_MAX_TOKENS"), 2048),
        top_p=_parse_float(os.getenv("LLM_TOP_P"), 0.8),
        top_k=_parse_int(os.getenv("LLM_TOP_K"), 40),
        rag_prompt_template=os.getenv("RAG_PROMPT_TEMPLATE", ""),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=_parse_optional_str(os.getenv("LOG_FILE")),
    )
    return config


__all__ = ["GenerationConfig", "load_config", "DEFAULT_LLM_MODEL"]
