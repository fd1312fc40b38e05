"""Validation and dispatch logic for BFHL requests."""

import inspect
from dataclasses import dataclass
from typing import Any, Callable

import structlog

from bfhl import numeric
from bfhl.config import Settings
from bfhl.genai import TextGenerator

from .schemas import BFHLResponse, Operation
from .exceptions import (
    EnvelopeKeyCountError,
    InvalidKeyError,
    OperandValidationError,
    InternalDispatchError,
)


logger = structlog.get_logger("dispatch")

# Returned for AI answers when the model produced no text
UNKNOWN_ANSWER = "Unknown"


@dataclass(frozen=True)
class OperationHandler:
    """How one operation checks its operand and computes its result.

    Attributes:
        error_message: Client-facing message when validation fails.
        validate: Returns the normalized operand or raises ValueError.
        compute: Produces the result data; may return an awaitable.
    """

    error_message: str
    validate: Callable[[Any], Any]
    compute: Callable[[Any], Any]


def parse_envelope(payload: Any) -> tuple[Operation, Any]:
    """Split a request body into its operation and operand.

    Args:
        payload: Decoded JSON body (None if the body wasn't valid JSON).

    Returns:
        The parsed operation and its raw operand.

    Raises:
        EnvelopeKeyCountError: If the body isn't an object with one key.
        InvalidKeyError: If the key doesn't name an operation.
    """
    if not isinstance(payload, dict):
        raise EnvelopeKeyCountError(key_count=0)
    if len(payload) != 1:
        raise EnvelopeKeyCountError(key_count=len(payload))

    (key, operand), = payload.items()
    try:
        operation = Operation(key)
    except ValueError:
        raise InvalidKeyError(key)
    return operation, operand


def validate_non_negative_integer(operand: Any) -> int:
    n = numeric.as_integer(operand)
    if n < 0:
        raise ValueError(f"{n} is negative")
    return n


def validate_array(operand: Any) -> list[Any]:
    if not isinstance(operand, list):
        raise ValueError("operand is not an array")
    return operand


def validate_non_empty_integer_array(operand: Any) -> list[int]:
    values = validate_array(operand)
    if not values:
        raise ValueError("array is empty")
    return [numeric.as_integer(v) for v in values]


def validate_question(operand: Any) -> str:
    if not isinstance(operand, str) or not operand.strip():
        raise ValueError("question is empty or not a string")
    return operand


def first_word(text: str | None) -> str:
    """First whitespace-delimited token of ``text``, or "Unknown" if none."""
    words = (text or "").split()
    return words[0] if words else UNKNOWN_ANSWER


async def _maybe_await(result: Any) -> Any:
    """Await async results while passing sync results through."""
    if inspect.isawaitable(result):
        return await result
    return result


class Dispatcher:
    """Runs one request envelope through the validation gates and its operation.

    Attributes:
        settings: Immutable application settings.
        generator: Text generator used by the AI operation.
    """

    def __init__(self, settings: Settings, generator: TextGenerator) -> None:
        self.settings = settings
        self.generator = generator
        self.handlers: dict[Operation, OperationHandler] = {
            Operation.FIBONACCI: OperationHandler(
                error_message="Fibonacci requires a non-negative integer",
                validate=validate_non_negative_integer,
                compute=numeric.fibonacci,
            ),
            Operation.PRIME: OperationHandler(
                error_message="Prime requires an integer array",
                validate=validate_array,
                compute=numeric.filter_primes,
            ),
            Operation.LCM: OperationHandler(
                error_message="LCM requires a non-empty integer array",
                validate=validate_non_empty_integer_array,
                compute=numeric.lcm_of,
            ),
            Operation.HCF: OperationHandler(
                error_message="HCF requires a non-empty integer array",
                validate=validate_non_empty_integer_array,
                compute=numeric.hcf_of,
            ),
            Operation.AI: OperationHandler(
                error_message="AI requires a non-empty question string",
                validate=validate_question,
                compute=self.answer,
            ),
        }

    async def answer(self, question: str) -> str:
        """Ask the text generator and keep only the first word of its reply."""
        text = await self.generator.generate(question)
        return first_word(text)

    async def dispatch(self, payload: Any) -> BFHLResponse:
        """Validate a request body and compute its operation.

        Args:
            payload: Decoded JSON request body.

        Returns:
            Successful BFHLResponse carrying the result.

        Raises:
            EnvelopeKeyCountError: If the body doesn't hold exactly one key.
            InvalidKeyError: If the key isn't a known operation.
            OperandValidationError: If the operand breaks the operation contract.
            InternalDispatchError: If computing the result fails for any reason.
        """
        try:
            operation, operand = parse_envelope(payload)
            handler = self.handlers[operation]
            try:
                value = handler.validate(operand)
            except ValueError:
                raise OperandValidationError(operation.value, handler.error_message)
        except (EnvelopeKeyCountError, InvalidKeyError, OperandValidationError) as e:
            logger.info("bfhl_rejected", error_code=e.code, error=e.message)
            raise

        logger.info("bfhl_request", operation=operation.value)

        try:
            data = await _maybe_await(handler.compute(value))
        except Exception as e:
            # Detail is logged only; clients get the generic message
            logger.exception(
                "bfhl_internal_error",
                operation=operation.value,
                error_code=getattr(e, "code", e.__class__.__name__),
            )
            raise InternalDispatchError(operation.value) from e

        return BFHLResponse.success(official_email=self.settings.OFFICIAL_EMAIL, data=data)
