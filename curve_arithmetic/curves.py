from . import curve


# Secp256k1 curve parameters
P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

# Secp256k1 order
SECP256K1_ORDER = N

# y^2 = x^3 + 7
SECP256K1 = curve.EllipticCurve(a=0, b=7, p=P)

# Generator point G for secp256k1
G = curve.Affine.from_coordinates(Gx, Gy)

# y^2 = x^3 + 2x + 2 mod 17, a cyclic group of 19 points
TOY_CURVE = curve.EllipticCurve(a=2, b=2, p=17)
TOY_GENERATOR = curve.Affine.from_coordinates(5, 1)
TOY_ORDER = 19
