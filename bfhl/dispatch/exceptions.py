"""Exceptions raised while dispatching a BFHL request."""

from bfhl.exceptions import BFHLError


INTERNAL_ERROR_MESSAGE = "Internal server error"


class InvalidRequestError(BFHLError):
    """Base exception for client-caused request failures (HTTP 400)."""
    pass


class EnvelopeKeyCountError(InvalidRequestError):
    """Raised when the request body doesn't hold exactly one key.
    
    Attributes:
        key_count: Number of keys found; 0 for bodies that aren't objects.
    """
    
    def __init__(self, key_count: int):
        super().__init__(
            message="Request must contain exactly one key",
            code="INVALID_KEY_COUNT"
        )
        self.key_count = key_count


class InvalidKeyError(InvalidRequestError):
    """Raised when the single key doesn't name a known operation.
    
    Attributes:
        key: The unrecognized key.
    """
    
    def __init__(self, key: str):
        super().__init__(message="Invalid key", code="INVALID_KEY")
        self.key = key


class OperandValidationError(InvalidRequestError):
    """Raised when an operand doesn't match its operation's contract.
    
    Attributes:
        operation: Name of the operation whose operand was rejected.
    """
    
    def __init__(self, operation: str, message: str):
        super().__init__(message=message, code="INVALID_OPERAND")
        self.operation = operation


class InternalDispatchError(BFHLError):
    """Raised when computing a validated operation fails (HTTP 500).
    
    The message is always generic; the cause stays on ``__cause__``.
    
    Attributes:
        operation: Name of the operation that failed.
    """
    
    def __init__(self, operation: str):
        super().__init__(message=INTERNAL_ERROR_MESSAGE, code="INTERNAL_ERROR")
        self.operation = operation
