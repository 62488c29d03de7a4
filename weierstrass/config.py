"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Configuration settings for weierstrass.
"""

import logging
import os

from appdirs import AppDirs

from weierstrass import WeierstrassError
from weierstrass.util import helpers


# The settings file lives in an OS-appropriate location.
_ad = AppDirs("Weierstrass", False)
DATA_DIR = _ad.user_data_dir

# The master configuration file name.
CONFIG_NAME = "weierstrass.conf"
CONFIG_PATH = os.path.join(DATA_DIR, CONFIG_NAME)

# Field arithmetic is checked against a signed machine word of this many bits.
DEFAULT_WORD_BITS = 64

Defaults = {
    "wordBits": DEFAULT_WORD_BITS,
    "logLevel": "INFO",
    "logFile": None,
    "moduleLevels": {},
}


def parseLevel(lvl):
    """
    Convert a level name such as "DEBUG" or an integer level into the integer
    level understood by the logging module.

    Args:
        lvl (str|int): The level.

    Returns:
        int: The logging level.
    """
    if isinstance(lvl, int):
        return lvl
    level = logging.getLevelName(str(lvl).upper())
    if not isinstance(level, int):
        raise WeierstrassError(f"unknown log level {lvl!r}")
    return level


class WeierConfig:
    """
    WeierConfig is configuration settings. The configuration file is JSON
    formatted.
    """

    def __init__(self, path=None):
        self.path = path if path else CONFIG_PATH
        self.file = helpers.fetchSettingsFile(self.path)
        self.normalize()

    def set(self, k, v):
        """
        Set the configuration option. The configuration is not saved, so `save`
        should be called separately.

        Args:
            k (str): The setting key.
            v (JSON-encodable): The value.
        """
        self.file[k] = v

    def get(self, *keys):
        """
        Retrieve the setting at the provided key path. Multiple keys can be
        provided, with each successive key being retrieved from the previous
        key's value.

        Args:
            *keys (str): Recursive key list.

        Returns:
            mixed: The configuration value.
        """
        d = self.file
        rVal = None
        for k in keys:
            if k not in d:
                return None
            rVal = d[k]
            d = rVal
        return rVal

    def normalize(self):
        """
        Perform attribute checks and initialization.
        """
        for k, v in Defaults.items():
            if k not in self.file:
                self.file[k] = v.copy() if isinstance(v, dict) else v
        bits = self.file["wordBits"]
        if not isinstance(bits, int) or bits < 2:
            raise WeierstrassError(f"invalid wordBits setting {bits!r}")

    @property
    def wordBits(self):
        return self.file["wordBits"]

    @property
    def logLevel(self):
        return parseLevel(self.file["logLevel"])

    def prepareLogging(self):
        """
        Apply the logging settings.
        """
        lvlMap = {k: parseLevel(v) for k, v in self.file["moduleLevels"].items()}
        helpers.prepareLogging(self.file["logFile"], self.logLevel, lvlMap)

    def save(self):
        """
        Save the file.
        """
        helpers.saveJSON(self.path, self.file, indent=4, sort_keys=True)


weierConfig = None


def load(path=None):
    """
    Load and return the current configuration.

    The configuration is only loaded once. Successive calls to the modular `load`
    function will return the same instance.

    Args:
        path (str): optional. A settings file to use instead of the default
            location. Only honored on the first call.

    Returns:
        WeierConfig: The current configuration.
    """
    global weierConfig
    if not weierConfig:
        weierConfig = WeierConfig(path)
    return weierConfig
