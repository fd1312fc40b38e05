"""Exceptions raised by the text generation client."""

from bfhl.exceptions import BFHLError


class GenerationError(BFHLError):
    """Raised when the text generation provider call fails.
    
    Attributes:
        model: Model the request was addressed to.
        status_code: HTTP status from the provider, if one was received.
        detail: Truncated provider error detail.
    """
    
    def __init__(self, model: str, status_code: int | None = None, detail: str = ""):
        super().__init__(
            message=f"Text generation with '{model}' failed ({status_code}): {detail}",
            code="GENERATION_ERROR"
        )
        self.model = model
        self.status_code = status_code
        self.detail = detail


class GenerationTimeoutError(GenerationError):
    """Raised when the provider doesn't respond in time.
    
    Attributes:
        timeout_seconds: Timeout duration that was exceeded.
    """
    
    def __init__(self, model: str, timeout_seconds: float):
        super().__init__(model=model, detail=f"timed out after {timeout_seconds}s")
        self.code = "GENERATION_TIMEOUT"
        self.timeout_seconds = timeout_seconds


class GenerationUnavailableError(GenerationError):
    """Raised when the provider is unreachable.
    
    Attributes:
        reason: Description of the connection failure.
    """
    
    def __init__(self, model: str, reason: str = "Connection failed"):
        super().__init__(model=model, detail=f"unavailable: {reason}")
        self.code = "GENERATION_UNAVAILABLE"
        self.reason = reason
