"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details
"""

from weierstrass import (
    FieldOverflowError,
    NotInvertibleError,
    WeierstrassError,
    config,
)

from .modular import modInverse


class FieldOps:
    """
    FieldOps performs arithmetic in the prime field of integers modulo p.

    Every result is canonical, i.e. in the range [0, p), regardless of the
    sign of the operands.

    Products are computed in a signed machine word of wordBits bits. The word
    must hold (p-1)^2, which is checked at construction, and every raw product
    is checked before it is reduced. Operands that were not reduced first can
    still overflow, in which case FieldOverflowError is raised instead of
    silently wrapping.
    """

    def __init__(self, p, wordBits=None):
        """
        Args:
            p (int): The field modulus. Intended to be prime, which is not
                validated.
            wordBits (int): optional. The signed word width. Defaults to the
                width in the loaded settings file, so pass it explicitly when
                the result must not depend on the user's configuration.
        """
        if p < 2:
            raise WeierstrassError(f"invalid field modulus {p}")
        if wordBits is None:
            wordBits = config.load().wordBits
        self._p = p
        self.wordBits = wordBits
        self.wordMax = (1 << (wordBits - 1)) - 1
        self.wordMin = -(1 << (wordBits - 1))
        if (p - 1) ** 2 > self.wordMax:
            raise FieldOverflowError(
                f"modulus {p} is too wide for a {wordBits}-bit word"
            )

    @property
    def p(self):
        """
        p is the field modulus. It is read-only.
        """
        return self._p

    def checked(self, v):
        """
        checked returns v unchanged, or raises FieldOverflowError if v is
        outside the signed word range.
        """
        if v > self.wordMax or v < self.wordMin:
            raise FieldOverflowError(
                f"intermediate value {v} overflows a {self.wordBits}-bit word"
            )
        return v

    def reduce(self, v):
        return v % self.p

    def add(self, a, b):
        return self.checked(a + b) % self.p

    def sub(self, a, b):
        return self.checked(a - b) % self.p

    def mul(self, a, b):
        """
        mul returns a*b mod p.
        """
        return self.checked(a * b) % self.p

    def inverse(self, v):
        """
        inverse returns the multiplicative inverse of v mod p.

        Raises:
            NotInvertibleError: v shares a factor with p.
        """
        inv = modInverse(v, self.p)
        if inv is None:
            raise NotInvertibleError(f"{v} is not invertible mod {self.p}")
        return inv

    def div(self, num, den):
        """
        div returns num/den mod p, i.e. num times the inverse of den.

        Raises:
            NotInvertibleError: den shares a factor with p.
        """
        return self.mul(num % self.p, self.inverse(den))

    def pow(self, num, k):
        """
        pow returns num^k mod p for a non-negative exponent k, using
        right-to-left square-and-multiply.
        """
        if k < 0:
            raise WeierstrassError(f"negative exponent {k}")
        result = 1 % self.p
        base = num % self.p
        while k:
            if k & 1:
                result = self.mul(result, base)
            k >>= 1
            if k:
                base = self.mul(base, base)
        return result
