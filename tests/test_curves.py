"""
Tests for curves.py - Named curve parameters
"""

from curve_arithmetic import curve
from curve_arithmetic import curves


class TestSecp256k1:
    """Tests for the secp256k1 parameter set."""

    def test_parameters(self):
        """Test the curve is y^2 = x^3 + 7 over P."""
        assert curves.SECP256K1 == curve.EllipticCurve(a=0, b=7, p=curves.P)
        assert curves.P == 2**256 - 2**32 - 977
        assert curves.SECP256K1_ORDER == curves.N

    def test_generator_on_curve(self):
        """Test G satisfies the curve equation."""
        assert curves.SECP256K1.is_on_curve(curves.G)
        assert (curves.G.x, curves.G.y) == (curves.Gx, curves.Gy)


class TestToyCurve:
    """Tests for the y^2 = x^3 + 2x + 2 mod 17 parameter set."""

    def test_generator_on_curve(self):
        """Test the generator satisfies the curve equation."""
        assert curves.TOY_CURVE.is_on_curve(curves.TOY_GENERATOR)

    def test_order(self):
        """Test the generator has the advertised order."""
        result = curves.TOY_CURVE.point_scalar_mul(
            curves.TOY_GENERATOR, curves.TOY_ORDER
        )
        assert result == curve.IDENTITY
