class CurveArithmeticError(ValueError):
    """Base class for arithmetic contract violations."""


class NotOnCurveError(CurveArithmeticError):
    """An affine point does not satisfy the curve equation."""


class OutOfRangeOperandError(CurveArithmeticError):
    """A field operand is not in the range [0, p)."""


class ZeroDivisorError(CurveArithmeticError, ZeroDivisionError):
    """A divisor is congruent to zero modulo p."""
