"""
Logging utilities for the Nominatim client tools.
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def getLogLevelByStr(levelStr: str, default: Optional[int] = None) -> Optional[int]:
    """Get log level by string."""
    level = getattr(logging, str(levelStr).upper(), None)
    if not isinstance(level, int):
        logger.error(f"Invalid log level '{levelStr}'")
        return default
    return level


def _getHandlerLevel(config: Dict[str, Any], key: str, default: int) -> int:
    if key not in config:
        return default
    level = getLogLevelByStr(config[key], default)
    return level if level is not None else default


def configureLogger(localLogger: logging.Logger, config: Dict[str, Any]) -> None:
    """Configure single logger from config section.

    Supported keys: level, format, propagate, console, console-level,
    file, file-level, rotate.
    """
    if "propagate" in config:
        localLogger.propagate = bool(config["propagate"])

    if "level" in config:
        logLevel = getLogLevelByStr(config["level"])
        if logLevel is not None:
            localLogger.setLevel(logLevel)

    logLevel = localLogger.getEffectiveLevel()
    formatter = logging.Formatter(config.get("format", DEFAULT_FORMAT))

    if not config.get("console", False) and "file" not in config:
        return

    # Clear existing handlers to avoid duplicates
    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)

    if config.get("console", False):
        consoleHandler = logging.StreamHandler()
        consoleHandler.setLevel(_getHandlerLevel(config, "console-level", logLevel))
        consoleHandler.setFormatter(formatter)
        localLogger.addHandler(consoleHandler)

    if "file" in config:
        logPath = Path(config["file"])
        logPath.parent.mkdir(parents=True, exist_ok=True)

        fileHandler: logging.Handler
        if config.get("rotate", False):
            fileHandler = TimedRotatingFileHandler(
                filename=logPath,
                when="midnight",
                interval=1,
                backupCount=7,
                encoding="utf-8",
            )
        else:
            fileHandler = logging.FileHandler(logPath, encoding="utf-8")

        fileHandler.setLevel(_getHandlerLevel(config, "file-level", logLevel))
        fileHandler.setFormatter(formatter)
        localLogger.addHandler(fileHandler)
        logger.info(f"Logging {localLogger.name} to file: {logPath}")


def initLogging(config: Dict[str, Any]) -> None:
    """Configure logging from [logging] config section.

    Named loggers may be tuned with [logging.logger."<name>"] sub-sections,
    e.g. [logging.logger."lib.nominatim"] level = "DEBUG".
    """
    rootLogger = logging.getLogger()
    rootLogger.setLevel(logging.INFO)

    configureLogger(rootLogger, config)
    logLevel = rootLogger.getEffectiveLevel()

    # httpx logs every request at INFO level
    if logLevel < logging.WARNING:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)

    for loggerName, loggerConfig in config.get("logger", {}).items():
        logger.debug(f"Configuring logger '{loggerName}' with config {loggerConfig}")
        configureLogger(logging.getLogger(loggerName), loggerConfig)

    logger.debug(f"Logging configured: root level={logLevel}")
