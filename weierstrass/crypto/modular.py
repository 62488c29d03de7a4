"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Integer number theory used by the field and curve code.
"""

from typing import Optional, Tuple

from weierstrass import WeierstrassError


def extendedGcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    extendedGcd runs the extended Euclidean algorithm.

    Args:
        a: The first operand.
        b: The second operand.

    Returns:
        (g, x, y) with g = gcd(a, b) and a*x + b*y = g.
    """
    if a == 0:
        return b, 0, 1
    g, x, y = extendedGcd(b % a, a)
    return g, y - (b // a) * x, x


def modInverse(a: int, m: int) -> Optional[int]:
    """
    modInverse finds x such that a*x = 1 (mod m).

    Args:
        a: The value to invert. It is reduced mod m first.
        m: The modulus. Must be positive.

    Returns:
        The inverse in [0, m), or None if a and m are not coprime.
    """
    if m <= 0:
        raise WeierstrassError(f"modulus must be positive, got {m}")
    g, x, _ = extendedGcd(a % m, m)
    if g != 1:
        return None
    return x % m
