"""Dispatch module - /bfhl request validation and operations."""

from .schemas import Operation, BFHLResponse, HealthResponse
from .exceptions import (
    INTERNAL_ERROR_MESSAGE,
    InvalidRequestError,
    EnvelopeKeyCountError,
    InvalidKeyError,
    OperandValidationError,
    InternalDispatchError,
)
from .service import Dispatcher, OperationHandler, parse_envelope, first_word


__all__ = [
    # Schemas
    "Operation",
    "BFHLResponse",
    "HealthResponse",
    # Exceptions
    "INTERNAL_ERROR_MESSAGE",
    "InvalidRequestError",
    "EnvelopeKeyCountError",
    "InvalidKeyError",
    "OperandValidationError",
    "InternalDispatchError",
    # Service
    "Dispatcher",
    "OperationHandler",
    "parse_envelope",
    "first_word",
]
