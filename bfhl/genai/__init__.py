"""Genai module - Gemini text generation client."""

from .schemas import GenerateContentRequest, Content, Part, extract_text
from .exceptions import (
    GenerationError,
    GenerationTimeoutError,
    GenerationUnavailableError,
)
from .client import TextGenerator


__all__ = [
    # Schemas
    "GenerateContentRequest",
    "Content",
    "Part",
    "extract_text",
    # Exceptions
    "GenerationError",
    "GenerationTimeoutError",
    "GenerationUnavailableError",
    # Client
    "TextGenerator",
]
