"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import copy
import pickle

import pytest

from weierstrass import WeierstrassError
from weierstrass.crypto.point import INFINITY, JacobianPoint, Point


def test_JacobianPoint():
    pt = JacobianPoint(5, 1)
    assert pt.coords() == (5, 1, 1)
    assert not pt.isInfinity
    assert isinstance(pt, Point)
    assert repr(pt) == "JacobianPoint(5, 1, 1)"

    pt = JacobianPoint(7, 7, 2)
    assert (pt.x, pt.y, pt.z) == (7, 7, 2)

    with pytest.raises(WeierstrassError):
        JacobianPoint(5, 1, 0)


def test_immutable():
    pt = JacobianPoint(5, 1)
    with pytest.raises(AttributeError):
        pt.x = 6
    with pytest.raises(AttributeError):
        INFINITY.x = 6
    assert pt.x == 5


def test_eq():
    assert JacobianPoint(5, 1) == JacobianPoint(5, 1, 1)
    assert JacobianPoint(5, 1) != JacobianPoint(5, 16)
    # Exact coordinate comparison, even if the points might be equivalent.
    assert JacobianPoint(7, 7, 2) != JacobianPoint(6, 3)
    assert JacobianPoint(5, 1) != INFINITY
    assert INFINITY != JacobianPoint(5, 1)
    assert INFINITY == INFINITY
    assert JacobianPoint(5, 1) != (5, 1, 1)

    pts = {JacobianPoint(5, 1), JacobianPoint(5, 1), INFINITY, INFINITY}
    assert len(pts) == 2


def test_INFINITY():
    assert INFINITY.isInfinity
    assert isinstance(INFINITY, Point)
    assert repr(INFINITY) == "INFINITY"


def test_copy_pickle():
    pt = JacobianPoint(7, 7, 2)
    for cp in (copy.copy(pt), copy.deepcopy(pt), pickle.loads(pickle.dumps(pt))):
        assert cp == pt
        assert hash(cp) == hash(pt)
        with pytest.raises(AttributeError):
            cp.x = 6

    # The point at infinity stays the singleton.
    assert copy.copy(INFINITY) is INFINITY
    assert copy.deepcopy(INFINITY) is INFINITY
    assert copy.deepcopy([INFINITY, pt])[0] is INFINITY
    assert pickle.loads(pickle.dumps(INFINITY)) is INFINITY
