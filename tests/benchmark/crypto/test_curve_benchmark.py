"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

from weierstrass.crypto.curve import Curve
from weierstrass.crypto.modular import modInverse
from weierstrass.crypto.point import JacobianPoint


P = 2 ** 31 - 1
K = 0x5A3C96E1


def _curve():
    # y^2 = x^3 + 3x + 7 and the point with the smallest x on it.
    curve = Curve(P, 3, 7)
    for x in range(1, 1000):
        rhs = (x ** 3 + 3 * x + 7) % P
        y = pow(rhs, (P + 1) // 4, P)
        if y * y % P == rhs and y != 0:
            return curve, JacobianPoint(x, y)


class Test_Curve:
    def test_modInverse(self, benchmark):
        benchmark(modInverse, K, P)

    def test_double(self, benchmark):
        curve, g = _curve()
        benchmark(curve.double, curve.double(g))

    def test_add(self, benchmark):
        curve, g = _curve()
        g2 = curve.double(g)
        benchmark(curve.add, g2, curve.double(g2))

    def test_scalarMult(self, benchmark):
        curve, g = _curve()
        benchmark(curve.scalarMult, K, g)
