"""
Copyright (c) 2019, the Decred developers
See LICENSE for details
"""

import random

import pytest

from weierstrass import config
from weierstrass.crypto.curve import Curve
from weierstrass.util import helpers


@pytest.fixture(scope="session", autouse=True)
def isolatedConfig(tmp_path_factory):
    # Keep the user's settings file out of the tests.
    cfgPath = tmp_path_factory.mktemp("config") / config.CONFIG_NAME
    config.weierConfig = config.WeierConfig(str(cfgPath))
    yield config.weierConfig
    config.weierConfig = None


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def randInts():
    def _randInts(n, low=0, high=1 << 32):
        return [random.randint(low, high) for _ in range(n)]

    return _randInts


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture
def curve17():
    """
    y^2 = x^3 + 2x + 2 over F_17. The group has prime order 19 and is
    generated by (5, 1).
    """
    return Curve(17, 2, 2)
