import logging

from . import errors


logger = logging.getLogger(__name__)


def add(m: int, n: int, p: int) -> int:
    """Compute (m + n) mod p."""
    return (m + n) % p


def multiply(m: int, n: int, p: int) -> int:
    """Compute (m * n) mod p."""
    return (m * n) % p


def power(m: int, e: int, p: int) -> int:
    """
    Compute m^e mod p.

    Args:
        m: Base
        e: Non-negative exponent
        p: Modulus

    Returns:
        m raised to e, reduced into [0, p)

    Raises:
        ValueError: If the exponent is negative
    """
    if e < 0:
        raise ValueError("Exponent must be non-negative")
    return pow(m, e, p)


def additive_inverse(m: int, p: int) -> int:
    """
    Compute -m mod p.

    Args:
        m: Operand, must be in [0, p)
        p: Modulus

    Returns:
        The value r in [0, p) such that m + r = 0 mod p

    Raises:
        OutOfRangeOperandError: If m is not in [0, p)
    """
    if not 0 <= m < p:
        logger.debug("additive_inverse operand %d outside [0, %d)", m, p)
        raise errors.OutOfRangeOperandError(
            f"number: {m} is not in the range [0, {p})"
        )
    return (p - m) % p


def subtract(m: int, n: int, p: int) -> int:
    """Compute (m - n) mod p. The subtrahend must be in [0, p)."""
    return add(m, additive_inverse(n, p), p)


def multiplicative_inverse(m: int, p: int) -> int:
    """
    Compute m^-1 mod p using Fermat's little theorem.

    Only valid for a prime modulus: m^(p-2) = m^-1 mod p.

    Args:
        m: Operand
        p: Prime modulus

    Returns:
        The value r in [0, p) such that m * r = 1 mod p

    Raises:
        ZeroDivisorError: If m = 0 mod p, which has no inverse
    """
    if m % p == 0:
        logger.debug("multiplicative_inverse of zero modulo %d", p)
        raise errors.ZeroDivisorError(f"{m} has no inverse modulo {p}")
    return power(m, p - 2, p)


def divide(m: int, n: int, p: int) -> int:
    """
    Compute m / n mod p.

    Raises:
        ZeroDivisorError: If n = 0 mod p
    """
    return multiply(m, multiplicative_inverse(n, p), p)
