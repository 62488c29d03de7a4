"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details
"""

import json
import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import sys
from typing import Any, Dict, List, Optional, Union


def mkdir(path: Union[Path, str]) -> bool:
    """
    Create the directory if it doesn't exist. Uses os.path .

    Args:
        path: the directory path.

    Returns:
        False if a regular file is in the way, True otherwise.
    """
    if os.path.isdir(path):
        return True
    if os.path.isfile(path):
        return False
    os.makedirs(path)
    return True


def fetchSettingsFile(filepath: Union[Path, str]) -> Dict[str, Any]:
    """
    Fetches the JSON settings file. A missing file reads as an empty settings
    object and is not created.

    Args:
        filepath: The path to the JSON file.

    Returns:
        The decoded settings.
    """
    if not os.path.isfile(filepath):
        return {}
    with open(filepath) as f:
        return json.load(f)


def saveJSON(filepath: Union[Path, str], thing: Any, **kwargs: Any) -> None:
    """
    Save the JSON-encodable object to the file, creating the parent directory
    as needed.

    Args:
        filepath: The destination path.
        thing: The object to encode.
        **kwargs: Passed through to json.dump.
    """
    parent = os.path.dirname(filepath)
    if parent:
        mkdir(parent)
    with open(filepath, "w") as f:
        json.dump(thing, f, **kwargs)


class LogSettings:
    """
    Used to track a few logging-related settings, and the handlers installed
    on the root logger by prepareLogging.
    """

    root = logging.getLogger("")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: List[logging.Handler] = []


LogSettings.root.setLevel(logging.NOTSET)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Prepare for using getLogger. Logs to stderr, and to a rotating log file if
    filepath is provided. The handlers from an earlier call are removed and
    closed first, so calling again reconfigures the output rather than
    duplicating it. Loggers already created by getLogger, and future ones,
    get their levels from the new logLvl and lvlMap.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The default logging level used for all loggers without
            entries in the lvlMap.
        lvlMap: The name->level mapping will be added to the stored level dict,
            which is referenced when loggers are created using getLogger.
    """
    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, logLvl))

    for handler in LogSettings.handlers:
        LogSettings.root.removeHandler(handler)
        handler.close()
    LogSettings.handlers = []

    formatter = logging.Formatter(LOG_FORMAT)
    if filepath:
        LogSettings.handlers.append(
            RotatingFileHandler(filepath, maxBytes=5 * 1024 * 1024, backupCount=2)
        )
    if not sys.executable.endswith("pythonw.exe"):
        # pythonw on Windows has no console to write to.
        LogSettings.handlers.append(logging.StreamHandler())
    for handler in LogSettings.handlers:
        handler.setFormatter(formatter)
        LogSettings.root.addHandler(handler)


def getLogger(name: str) -> Logger:
    """
    Gets a named child of the root logger, e.g. "CURVE". The level is the one
    registered for the name with prepareLogging, or the default level.

    Args:
        name: The logger name.
    """
    logger = LogSettings.root.getChild(name)
    logger.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = logger
    return logger
