"""Pydantic schemas and operation names for the /bfhl endpoint."""

from enum import Enum
from typing import Any
from pydantic import BaseModel, Field


class Operation(str, Enum):
    """Operations selectable by the request key (case-sensitive)."""
    
    FIBONACCI = "fibonacci"
    PRIME = "prime"
    LCM = "lcm"
    HCF = "hcf"
    AI = "AI"


class BFHLResponse(BaseModel):
    """Uniform response envelope.
    
    Exactly one of ``data`` and ``error`` is set, governed by ``is_success``.
    Unset fields are dropped when serializing.
    
    Attributes:
        is_success: Whether the operation succeeded.
        official_email: Operator email, present on success only.
        data: Operation result on success.
        error: Human-readable error on failure.
    """
    
    is_success: bool = Field(..., description="Whether the request succeeded")
    official_email: str | None = Field(default=None, description="Operator email")
    data: Any | None = Field(default=None, description="Result on success")
    error: str | None = Field(default=None, description="Error on failure")
    
    @classmethod
    def success(cls, official_email: str, data: Any) -> "BFHLResponse":
        """Create a successful response.
        
        Args:
            official_email: Configured operator email.
            data: Result data.
            
        Returns:
            BFHLResponse with data populated.
        """
        return cls(is_success=True, official_email=official_email, data=data)
    
    @classmethod
    def failure(cls, error: str) -> "BFHLResponse":
        """Create a failed response carrying only the error message."""
        return cls(is_success=False, error=error)
    
    def to_content(self) -> dict[str, Any]:
        """JSON-ready dict without the unset fields."""
        return self.model_dump(exclude_none=True)


class HealthResponse(BaseModel):
    """Liveness probe payload."""
    
    is_success: bool = True
    official_email: str
