"""Integer helpers behind the numeric BFHL operations."""

from math import isqrt
from typing import Any, Iterable, List


def is_integer(value: Any) -> bool:
    """Check whether a decoded JSON value is an integer.

    JSON has a single number type, so ``5.0`` counts as the integer 5.
    Booleans are never integers even though ``bool`` subclasses ``int``.

    Args:
        value: Any value produced by a JSON decoder.

    Returns:
        True if the value is an integral number.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def as_integer(value: Any) -> int:
    """Normalize an integral JSON number to ``int``.

    Raises:
        ValueError: If the value is not an integer per :func:`is_integer`.
    """
    if not is_integer(value):
        raise ValueError(f"{value!r} is not an integer")
    return int(value)


def is_prime(n: int) -> bool:
    """Trial-division primality test. Anything below 2 is not prime."""
    if n < 2:
        return False
    for divisor in range(2, isqrt(n) + 1):
        if n % divisor == 0:
            return False
    return True


def _remainder(a: int, b: int) -> int:
    """Remainder with the sign of the dividend (truncated division)."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def gcd(a: int, b: int) -> int:
    """Iterative Euclidean greatest common divisor; ``gcd(a, 0)`` is ``a``.

    The sign is whatever the Euclid steps leave, so negative operands
    can give a negative result.
    """
    while b != 0:
        a, b = b, _remainder(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two integers, ``a * b / gcd(a, b)``.

    Raises:
        ZeroDivisionError: If both operands are zero.
    """
    return a * b // gcd(a, b)


def fibonacci(n: int) -> List[int]:
    """Return the first ``n`` Fibonacci numbers, starting ``0, 1, 1, 2``."""
    sequence = []
    a, b = 0, 1
    for _ in range(n):
        sequence.append(a)
        a, b = b, a + b
    return sequence


def filter_primes(values: Iterable[Any]) -> List[int]:
    """Keep the prime integers of ``values`` in their original order.

    Elements that are not integers are dropped rather than rejected.
    """
    return [as_integer(v) for v in values if is_integer(v) and is_prime(as_integer(v))]


def lcm_of(values: List[int]) -> int:
    """Left-fold :func:`lcm` over a non-empty list.

    Any zero makes the result zero, so the both-zero case never divides.
    """
    if 0 in values:
        return 0
    result = values[0]
    for value in values[1:]:
        result = lcm(result, value)
    return result


def hcf_of(values: List[int]) -> int:
    """Left-fold :func:`gcd` over a non-empty list."""
    result = values[0]
    for value in values[1:]:
        result = gcd(result, value)
    return result
