import dataclasses
import logging
import typing as t

from . import errors
from . import finite_field as ff


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Identity:
    """The point at infinity, the additive identity of the curve group."""


@dataclasses.dataclass(frozen=True)
class Affine:
    """A curve point in affine coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        """Validate coordinates on initialization."""
        if not (isinstance(self.x, int) and isinstance(self.y, int)):
            raise TypeError("Point coordinates must be integers")
        if self.x < 0 or self.y < 0:
            raise ValueError("Point coordinates must be non-negative")

    @classmethod
    def from_coordinates(cls, x: int, y: int) -> "Affine":
        """Create an Affine point from x and y coordinates."""
        return cls(x=x, y=y)

    def __repr__(self) -> str:
        return f"Affine(0x{self.x:x}, 0x{self.y:x})"


Point = t.Union[Identity, Affine]

IDENTITY = Identity()


def _check_point(point: object) -> None:
    if not isinstance(point, (Identity, Affine)):
        raise TypeError(f"Expected Identity or Affine point, got {type(point).__name__}")


@dataclasses.dataclass(frozen=True)
class EllipticCurve:
    """
    A short Weierstrass curve y^2 = x^3 + ax + b over the prime field of order p.

    The parameters are not checked for primality or non-singularity.
    """

    a: int
    b: int
    p: int

    def __post_init__(self) -> None:
        if self.p < 2:
            raise ValueError("Modulus must be at least 2")
        if self.a < 0 or self.b < 0:
            raise ValueError("Curve coefficients must be non-negative")

    def is_on_curve(self, point: Point) -> bool:
        """
        Check whether a point satisfies y^2 = x^3 + ax + b (mod p).

        The identity is always on the curve.
        """
        _check_point(point)
        if isinstance(point, Identity):
            return True

        x, y = point.x, point.y
        if x >= self.p or y >= self.p:
            return False

        y2 = ff.power(y, 2, self.p)
        x3 = ff.power(x, 3, self.p)
        ax = ff.multiply(self.a, x, self.p)
        x3_plus_ax = ff.add(x3, ax, self.p)
        return y2 == ff.add(x3_plus_ax, self.b, self.p)

    def validate(self, point: Point) -> Point:
        """
        Ensure a point lies on this curve.

        Args:
            point: Point to check

        Returns:
            The same point

        Raises:
            NotOnCurveError: If the point is not on the curve
        """
        if not self.is_on_curve(point):
            logger.debug("Rejected point %r for %r", point, self)
            raise errors.NotOnCurveError(f"Point {point!r} is not on the curve")
        return point

    def point_add(self, m: Point, n: Point) -> Point:
        """
        Add two points with the chord rule.

        Args:
            m: First point
            n: Second point

        Returns:
            m + n

        Raises:
            NotOnCurveError: If either point is not on the curve
        """
        self.validate(m)
        self.validate(n)

        if isinstance(m, Identity):
            return n
        if isinstance(n, Identity):
            return m

        x1, y1 = m.x, m.y
        x2, y2 = n.x, n.y

        if x1 == x2:
            if ff.add(y1, y2, self.p) == 0:
                # P + (-P) = point at infinity
                return IDENTITY
            # Same x and not the inverse, so the points are equal
            logger.debug("Adding %r to itself, using the tangent rule", m)
            return self.point_double(m)

        # s = (y2 - y1) / (x2 - x1) mod p
        numerator = ff.subtract(y2, y1, self.p)
        denominator = ff.subtract(x2, x1, self.p)
        s = ff.divide(numerator, denominator, self.p)

        x3, y3 = self._compute_x3_y3(x1, y1, x2, s)
        return Affine(x3, y3)

    def point_double(self, m: Point) -> Point:
        """
        Double a point with the tangent rule.

        A point with y = 0 has order two and doubles to the identity.

        Raises:
            NotOnCurveError: If the point is not on the curve
        """
        self.validate(m)

        if isinstance(m, Identity):
            return IDENTITY

        x1, y1 = m.x, m.y
        if y1 == 0:
            logger.debug("Doubling order-2 point %r", m)
            return IDENTITY

        # s = (3 * x1^2 + a) / (2 * y1) mod p
        numerator = ff.power(x1, 2, self.p)
        numerator = ff.multiply(3, numerator, self.p)
        numerator = ff.add(self.a, numerator, self.p)
        denominator = ff.multiply(2, y1, self.p)
        s = ff.divide(numerator, denominator, self.p)

        x3, y3 = self._compute_x3_y3(x1, y1, x1, s)
        return Affine(x3, y3)

    def _compute_x3_y3(self, x1: int, y1: int, x2: int, s: int) -> t.Tuple[int, int]:
        # x3 = s^2 - x1 - x2 mod p
        # y3 = s(x1 - x3) - y1 mod p
        s2 = ff.power(s, 2, self.p)
        x3 = ff.subtract(ff.subtract(s2, x1, self.p), x2, self.p)
        x1_minus_x3 = ff.subtract(x1, x3, self.p)
        y3 = ff.subtract(ff.multiply(s, x1_minus_x3, self.p), y1, self.p)
        return x3, y3

    def point_scalar_mul(self, m: Point, k: int) -> Point:
        """
        Multiply a point by a scalar using the double-and-add algorithm.

        Bits of k are scanned from the second most significant one down to
        bit 0; the most significant bit is the starting accumulator.

        Args:
            m: Point to multiply
            k: Non-negative scalar

        Returns:
            k * m

        Raises:
            ValueError: If the scalar is not a non-negative integer
            NotOnCurveError: If the point is not on the curve
        """
        if isinstance(k, bool) or not isinstance(k, int) or k < 0:
            raise ValueError("Scalar must be a non-negative integer")
        self.validate(m)

        if k == 0:
            return IDENTITY
        if k == 1:
            return m

        logger.debug("Scalar multiplication with a %d-bit scalar", k.bit_length())

        result = m
        for i in reversed(range(k.bit_length() - 1)):
            result = self.point_double(result)
            if (k >> i) & 1:
                result = self.point_add(result, m)

        return result

    def point_negate(self, m: Point) -> Point:
        """Return the additive inverse of a point."""
        self.validate(m)

        if isinstance(m, Identity):
            return IDENTITY
        return Affine(m.x, ff.additive_inverse(m.y, self.p))


def is_on_curve(curve: EllipticCurve, point: Point) -> bool:
    """Check whether a point lies on the given curve."""
    return curve.is_on_curve(point)


def point_add(curve: EllipticCurve, p1: Point, p2: Point) -> Point:
    """
    Add two points on the given curve.

    Args:
        curve: Curve both points belong to
        p1: First point
        p2: Second point

    Returns:
        Sum of points
    """
    return curve.point_add(p1, p2)


def point_double(curve: EllipticCurve, point: Point) -> Point:
    """Double a point on the given curve."""
    return curve.point_double(point)


def point_scalar_mul(curve: EllipticCurve, point: Point, k: int) -> Point:
    """
    Multiply a point by a scalar using the double-and-add algorithm.

    Args:
        curve: Curve the point belongs to
        point: Point to multiply
        k: Non-negative scalar multiplier

    Returns:
        Product point
    """
    return curve.point_scalar_mul(point, k)


def point_negate(curve: EllipticCurve, point: Point) -> Point:
    """Negate a point on the given curve."""
    return curve.point_negate(point)
