"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Point values in Jacobian coordinates. For a given (x, y) position on the
curve, the Jacobian coordinates are (x1, y1, z1) where x = x1/z1^2 and
y = y1/z1^3. The point at infinity is a separate value, INFINITY, rather than
any particular coordinate triple.

Points do not know which curve they belong to. Every operation that needs the
field takes the curve explicitly.
"""

import dataclasses

from weierstrass import WeierstrassError


class Point:
    """
    Point is the common base of JacobianPoint and the point at infinity.
    """

    __slots__ = ()

    isInfinity = False


@dataclasses.dataclass(frozen=True, repr=False)
class JacobianPoint(Point):
    """
    JacobianPoint is a finite point (x, y, z). Equality and hashing compare
    coordinates exactly, so two different triples for the same affine point
    are not equal here, see Curve.equivalent.
    """

    x: int
    y: int
    z: int = 1

    def __post_init__(self) -> None:
        if self.z == 0:
            raise WeierstrassError("z = 0 is not a finite point, use INFINITY")

    def coords(self):
        """
        coords returns the (x, y, z) tuple.
        """
        return self.x, self.y, self.z

    def __repr__(self):
        return f"JacobianPoint({self.x}, {self.y}, {self.z})"


class _Infinity(Point):
    __slots__ = ()

    isInfinity = True

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return other.isInfinity

    def __hash__(self):
        return hash("INFINITY")

    def __repr__(self):
        return "INFINITY"

    def __reduce__(self):
        # Copies and unpickled values resolve to the module singleton.
        return "INFINITY"


# INFINITY is the point at infinity, the identity of the group law.
INFINITY = _Infinity()
