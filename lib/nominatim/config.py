"""
Configuration for Nominatim clients.

The clients only need NominatimProperties. The surrounding application may
build it by hand or load it from a TOML file with loadConfig():

    [nominatim]
    search-uri = "https://nominatim.openstreetmap.org/search"
    reverse-uri = "https://nominatim.openstreetmap.org/reverse"
    user-agent = "my-app/1.0 (${CONTACT_EMAIL})"
    request-timeout = 10

    [logging]
    level = "INFO"
    console = true

${VAR} placeholders are replaced with environment variables, which may be
provided via a .env file.
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import tomli

from .constants import DEFAULT_REVERSE_URI, DEFAULT_SEARCH_URI, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NominatimProperties:
    """Immutable client configuration, safe to share between clients and threads.

    Attributes:
        searchUri: Endpoint for search requests (may already contain a query string)
        reverseUri: Endpoint for reverse search requests
        userAgent: Value of the User-Agent header, required by the usage policy
        requestTimeout: HTTP request timeout in seconds
    """

    searchUri: str = DEFAULT_SEARCH_URI
    reverseUri: str = DEFAULT_REVERSE_URI
    userAgent: str = DEFAULT_USER_AGENT
    requestTimeout: float = DEFAULT_TIMEOUT

    @classmethod
    def fromConfig(cls, config: Optional[Dict[str, Any]]) -> "NominatimProperties":
        """Create properties from [nominatim] config section, dood!

        Missing keys keep their defaults.

        Args:
            config: Dict with "search-uri", "reverse-uri", "user-agent" and
                "request-timeout" keys (all optional)

        Returns:
            NominatimProperties instance
        """
        config = config or {}
        return cls(
            searchUri=str(config.get("search-uri", DEFAULT_SEARCH_URI)),
            reverseUri=str(config.get("reverse-uri", DEFAULT_REVERSE_URI)),
            userAgent=str(config.get("user-agent", DEFAULT_USER_AGENT)),
            requestTimeout=float(config.get("request-timeout", DEFAULT_TIMEOUT)),
        )


def loadDotEnv(path: str = ".env") -> Dict[str, str]:
    """Read KEY=VALUE lines of a .env file into the environment.

    Variables already present in the environment are not overridden.

    Args:
        path: Path to .env file

    Returns:
        Dictionary of key-value pairs from the file (empty if there is no file)
    """
    ret: Dict[str, str] = {}
    envFile = Path(path)
    if not envFile.is_file():
        return ret

    with open(envFile, "rt", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            ret[key.strip()] = value.strip().strip('"')

    for key, value in ret.items():
        os.environ.setdefault(key, value)
    return ret


def _replaceMatchToEnv(match: re.Match[str]) -> str:
    return os.getenv(match.group(1), match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively replace ${VAR_NAME} placeholders with environment values.

    Unknown variables are left as is. Strings, dicts and lists are processed,
    other values are returned unchanged.
    """
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", _replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


def loadConfig(configPath: str = "config.toml", dotEnvFile: Optional[str] = ".env") -> Dict[str, Any]:
    """Load configuration from TOML file, dood!

    A missing file is not an error: an empty config is returned and all
    defaults apply. A file which can not be parsed raises tomli.TOMLDecodeError.

    Args:
        configPath: Path to TOML config file
        dotEnvFile: Optional .env file to load before substitution

    Returns:
        Configuration dictionary with environment variables substituted
    """
    if dotEnvFile:
        loadDotEnv(dotEnvFile)

    configFile = Path(configPath)
    if not configFile.is_file():
        logger.info(f"Configuration file {configPath} not found, using defaults")
        return {}

    with open(configFile, "rb") as f:
        config = tomli.load(f)
    logger.info(f"Loaded config from {configPath}")

    return substituteEnvVars(config)
