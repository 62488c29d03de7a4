"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import math
import random

import pytest

from weierstrass import WeierstrassError
from weierstrass.crypto.modular import extendedGcd, modInverse


def test_extendedGcd():
    tests = [
        # (a, b, gcd)
        (0, 5, 5),
        (5, 0, 5),
        (240, 46, 2),
        (46, 240, 2),
        (17, 3, 1),
        (12, 18, 6),
        (1, 1, 1),
    ]
    for a, b, want in tests:
        g, x, y = extendedGcd(a, b)
        assert g == want
        assert a * x + b * y == g

    # The base case returns the Bézout pair (0, 1) untouched.
    assert extendedGcd(0, 7) == (7, 0, 1)


def test_extendedGcd_rand(randInts):
    for a, b in zip(randInts(200), randInts(200)):
        g, x, y = extendedGcd(a, b)
        assert g == math.gcd(a, b)
        assert a * x + b * y == g


def test_modInverse():
    tests = [
        # (a, m, inverse)
        (3, 17, 6),
        (8, 17, 15),
        (1, 17, 1),
        (16, 17, 16),
        (-3, 17, 11),
        (20, 17, 6),
        (3, 7, 5),
        (5, 1, 0),
        # Not coprime.
        (0, 17, None),
        (17, 17, None),
        (2, 4, None),
        (6, 9, None),
    ]
    for a, m, want in tests:
        assert modInverse(a, m) == want


def test_modInverse_rand():
    p = 2 ** 31 - 1
    for _ in range(200):
        a = random.randint(1, p - 1)
        inv = modInverse(a, p)
        assert 0 <= inv < p
        assert a * inv % p == 1


def test_modInverse_bad_modulus():
    with pytest.raises(WeierstrassError):
        modInverse(3, 0)
    with pytest.raises(WeierstrassError):
        modInverse(3, -17)
