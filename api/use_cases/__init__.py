"""Use case orchestration."""

from .rag import RAGUseCase
from .structure import StructureUseCase

__all__ = ["RAGUseCase", "StructureUseCase"]
