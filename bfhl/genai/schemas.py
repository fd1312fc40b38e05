"""Pydantic schemas for the Gemini generateContent API."""

from typing import Any
from pydantic import BaseModel, Field


class Part(BaseModel):
    """A single content part carrying text."""
    
    text: str = Field(..., description="Prompt or response text")


class Content(BaseModel):
    """One turn of content made of parts."""
    
    parts: list[Part] = Field(default_factory=list, description="Content parts")


class GenerateContentRequest(BaseModel):
    """Request body for ``models/{model}:generateContent``.
    
    Attributes:
        contents: Conversation turns; a single user turn for one-shot prompts.
    """
    
    contents: list[Content] = Field(..., description="Conversation contents")
    
    @classmethod
    def from_prompt(cls, prompt: str) -> "GenerateContentRequest":
        """Wrap a bare prompt in the single-turn request shape.
        
        Args:
            prompt: Text to send to the model.
            
        Returns:
            Request with one content holding one text part.
        """
        return cls(contents=[Content(parts=[Part(text=prompt)])])


def extract_text(body: Any) -> str:
    """Pull ``candidates[0].content.parts[0].text`` out of a response body.
    
    Any missing or unexpected level yields an empty string.
    """
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""
