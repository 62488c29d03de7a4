"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""


class WeierstrassError(Exception):
    pass


class NotInvertibleError(WeierstrassError):
    """
    A field element has no multiplicative inverse for the modulus in use.
    """

    pass


class FieldOverflowError(WeierstrassError):
    """
    An intermediate product does not fit the configured machine word.
    """

    pass
