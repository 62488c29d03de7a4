"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Short Weierstrass curves y^2 = x^3 + a*x + b over a prime field.

References:
  [GECC]: Guide to Elliptic Curve Cryptography (Hankerson, Menezes, Vanstone)

  [EFD]: Explicit-Formulas Database, short Weierstrass curves in Jacobian
    coordinates
    http://hyperelliptic.org/EFD/g1p/auto-shortw-jacobian.html

All group operations are performed using Jacobian coordinates.  For a given
(x, y) position on the curve, the Jacobian coordinates are (x1, y1, z1)
where x = x1/z1^2 and y = y1/z1^3.
"""

from weierstrass import NotInvertibleError, WeierstrassError
from weierstrass.util import helpers

from .field import FieldOps
from .point import INFINITY, JacobianPoint


log = helpers.getLogger("CURVE")


class Curve:
    """
    Curve is the curve y^2 = x^3 + a*x + b (mod p). The coefficients are
    stored reduced mod p.

    The curve is assumed to be non-singular, 4*a^3 + 27*b^2 != 0 (mod p).
    This is not checked, and results on a singular curve are meaningless.

    The parameters are read-only. p is the modulus of the curve's FieldOps.

    If wordBits is omitted, the width comes from the loaded settings file
    (config.load().wordBits). Whether a modulus is accepted, and which
    operands overflow, then depends on the user's configuration. Pass
    wordBits explicitly for results that don't depend on the machine.
    """

    def __init__(self, p, a, b, wordBits=None):
        """
        Args:
            p (int): The field modulus, intended prime.
            a (int): The linear coefficient.
            b (int): The constant coefficient.
            wordBits (int): optional. The signed word width for the field
                arithmetic. Defaults to the configured width.
        """
        self._field = FieldOps(p, wordBits)
        self._a = a % p
        self._b = b % p
        log.debug("new curve p=%d a=%d b=%d", self.p, self.a, self.b)

    @property
    def field(self):
        return self._field

    @property
    def p(self):
        return self._field.p

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    def __repr__(self):
        return f"Curve(p={self.p}, a={self.a}, b={self.b})"

    def identity(self):
        """
        identity returns the point at infinity.
        """
        return INFINITY

    def point(self, x, y, z=1):
        """
        point creates a JacobianPoint with its coordinates reduced into the
        field.
        """
        f = self.field
        return JacobianPoint(f.reduce(x), f.reduce(y), f.reduce(z))

    def _coords(self, q):
        """
        _coords returns the reduced (x, y, z) of q, or None if q is the point
        at infinity. A triple whose z is a multiple of p is also infinity.
        """
        if q.isInfinity:
            return None
        f = self.field
        z = f.reduce(q.z)
        if z == 0:
            return None
        return f.reduce(q.x), f.reduce(q.y), z

    def _jacobian(self, x, y, z):
        if z == 0:
            return INFINITY
        return JacobianPoint(x, y, z)

    def isOnCurve(self, q):
        """
        isOnCurve returns True if q satisfies the curve equation. The point at
        infinity is on every curve.

        With X = x/z^2 and Y = y/z^3, the affine equation becomes
        y^2 = x^3 + a*x*z^4 + b*z^6, so no inversion is needed.
        """
        c = self._coords(q)
        if c is None:
            return True
        x, y, z = c
        f = self.field
        z2 = f.mul(z, z)
        z4 = f.mul(z2, z2)
        z6 = f.mul(z4, z2)
        lhs = f.mul(y, y)
        rhs = f.mul(f.mul(x, x), x)
        rhs = f.add(rhs, f.mul(self.a, f.mul(x, z4)))
        rhs = f.add(rhs, f.mul(self.b, z6))
        return lhs == rhs

    def toAffine(self, q):
        """
        toAffine returns the point equivalent to q with a z coordinate of 1.
        The point at infinity is returned as is.

        Raises:
            NotInvertibleError: z is not invertible, which can only happen
                when the modulus is not prime.
        """
        c = self._coords(q)
        if c is None:
            return INFINITY
        x, y, z = c
        if z == 1:
            return JacobianPoint(x, y)
        f = self.field
        # fmt: off
        zInv = f.inverse(z)        # zInv = Z^-1
        zInv2 = f.mul(zInv, zInv)  # zInv2 = Z^-2
        x = f.mul(x, zInv2)        # X = X/Z^2
        y = f.mul(y, f.mul(zInv2, zInv))  # Y = Y/Z^3
        # fmt: on
        return JacobianPoint(x, y)

    def equivalent(self, q1, q2):
        """
        equivalent returns True if q1 and q2 represent the same point, even if
        their Jacobian coordinates differ.
        """
        return self.toAffine(q1) == self.toAffine(q2)

    def tangentSlope(self, q):
        """
        tangentSlope returns the slope of the tangent line at q,
        (3x^2 + a) / 2y in affine coordinates.

        Raises:
            NotInvertibleError: 2y is not invertible, e.g. y = 0 for a point
                of order 2, or q is the point at infinity.
        """
        aff = self.toAffine(q)
        if aff.isInfinity:
            raise NotInvertibleError("no tangent at the point at infinity")
        f = self.field
        num = f.add(f.mul(3, f.mul(aff.x, aff.x)), self.a)
        return f.div(num, f.mul(2, aff.y))

    def double(self, q):
        """
        double returns 2*q.
        """
        c = self._coords(q)
        # Doubling a point at infinity is still infinity.
        if c is None:
            return INFINITY
        x1, y1, z1 = c
        # The tangent at a point with y = 0 is vertical.
        if y1 == 0:
            return INFINITY

        # Point doubling formula for Jacobian coordinates:
        # S = 4*X1*Y1^2, M = 3*X1^2 + a*Z1^4
        # X3 = M^2 - 2*S
        # Y3 = M*(S - X3) - 8*Y1^4
        # Z3 = 2*Y1*Z1
        f = self.field
        # fmt: off
        yy = f.mul(y1, y1)                           # Y1^2
        s = f.mul(4, f.mul(x1, yy))                  # S = 4*X1*Y1^2
        z2 = f.mul(z1, z1)                           # Z1^2
        z4 = f.mul(z2, z2)                           # Z1^4
        m = f.add(f.mul(3, f.mul(x1, x1)), f.mul(self.a, z4))  # M = 3*X1^2+a*Z1^4
        x3 = f.sub(f.mul(m, m), f.mul(2, s))         # X3 = M^2-2*S
        y3 = f.sub(f.mul(m, f.sub(s, x3)), f.mul(8, f.mul(yy, yy)))  # Y3 = M*(S-X3)-8*Y1^4
        z3 = f.mul(2, f.mul(y1, z1))                 # Z3 = 2*Y1*Z1
        # fmt: on
        return self._jacobian(x3, y3, z3)

    def add(self, q1, q2):
        """
        add returns q1 + q2.
        """
        # A point at infinity is the identity according to the group law for
        # elliptic curve cryptography.  Thus, ∞ + P = P and P + ∞ = P.
        c1 = self._coords(q1)
        if c1 is None:
            return q2
        c2 = self._coords(q2)
        if c2 is None:
            return q1
        x1, y1, z1 = c1
        x2, y2, z2 = c2

        # Since any number of Jacobian coordinates can represent the same
        # affine point, the x and y values need to be converted to like terms.
        f = self.field
        # fmt: off
        z1z1 = f.mul(z1, z1)              # Z1Z1 = Z1^2
        z2z2 = f.mul(z2, z2)              # Z2Z2 = Z2^2
        u1 = f.mul(x1, z2z2)              # U1 = X1*Z2Z2
        u2 = f.mul(x2, z1z1)              # U2 = X2*Z1Z1
        s1 = f.mul(f.mul(y1, z2z2), z2)   # S1 = Y1*Z2*Z2Z2
        s2 = f.mul(f.mul(y2, z1z1), z1)   # S2 = Y2*Z1*Z1Z1
        # fmt: on

        # When the x coordinates are the same for two points on the curve, the
        # y coordinates either must be the same, in which case it is point
        # doubling, or they are opposite and the result is the point at
        # infinity per the group law.
        if u1 == u2:
            if s1 == s2:
                return self.double(q1)
            return INFINITY

        # H = U2-U1, R = S2-S1
        # X3 = R^2 - H^3 - 2*U1*H^2
        # Y3 = R*(U1*H^2 - X3) - S1*H^3
        # Z3 = H*Z1*Z2
        # fmt: off
        h = f.sub(u2, u1)                                # H = U2-U1
        r = f.sub(s2, s1)                                # R = S2-S1
        hh = f.mul(h, h)                                 # HH = H^2
        hhh = f.mul(hh, h)                               # HHH = H^3
        v = f.mul(u1, hh)                                # V = U1*HH
        x3 = f.sub(f.sub(f.mul(r, r), hhh), f.mul(2, v))  # X3 = R^2-HHH-2*V
        y3 = f.sub(f.mul(r, f.sub(v, x3)), f.mul(s1, hhh))  # Y3 = R*(V-X3)-S1*HHH
        z3 = f.mul(h, f.mul(z1, z2))                     # Z3 = H*Z1*Z2
        # fmt: on
        return self._jacobian(x3, y3, z3)

    def scalarMult(self, k, q, observer=None):
        """
        scalarMult returns k*q using the right-to-left binary method,
        algorithm 3.26 from [GECC].

        Args:
            k (int): A non-negative scalar.
            q (Point): The point to multiply.
            observer (callable): optional. Called once per bit of k, lowest
                first, as observer(bitIndex, bitSet, accumulator, base) after
                the accumulator has been updated for that bit. It only
                observes.

        Returns:
            Point: k*q. The point at infinity for k = 0.
        """
        if k < 0:
            raise WeierstrassError(f"scalar must be non-negative, got {k}")
        log.debug("scalarMult: %d-bit scalar on %r", k.bit_length(), self)

        # Point R = ∞ (point at infinity).
        acc = INFINITY
        base = q
        bitIdx = 0
        while k:
            bitSet = k & 1 == 1
            if bitSet:
                acc = self.add(acc, base)
            if observer:
                observer(bitIdx, bitSet, acc, base)
            k >>= 1
            # The base is only doubled when another bit will consume it.
            if k:
                base = self.double(base)
            bitIdx += 1
        return acc
