"""
Configuration management for BOSS Geo client.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import tomli

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "boss-geo": {
        "consumer-key": "${BOSS_GEO_CONSUMER_KEY}",
        "consumer-secret": "${BOSS_GEO_CONSUMER_SECRET}",
        "request-timeout": 10,
    },
    "logging": {
        "level": "INFO",
        "console": True,
    },
}

_ENV_VAR_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}")


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace environment variable placeholder with its value, or empty string if unset."""
    return os.getenv(match.group(1), "")


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ${VAR_NAME} placeholders in configuration values.

    Args:
        value: Configuration value: string, dict, list or anything else

    Returns:
        The value with placeholders replaced; non-container, non-string
        values are returned unchanged
    """
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


def loadDotEnv(path: str = ".env", populateEnv: bool = True) -> Dict[str, str]:
    """
    Simple dotenv file loader.
    Just read file line by line and put key-value pairs into dictionary.
    Variables already present in environment are not overridden.

    Args:
        path: Path to .env file (default ".env")
        populateEnv: Whether to populate environment variables (default True)

    Returns:
        Dictionary of key-value pairs from .env file, empty if file is absent
    """
    ret: Dict[str, str] = {}
    if not os.path.isfile(path):
        return ret

    with open(path, "rt", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            key, sep, value = line.partition("=")
            if sep:
                ret[key.strip()] = value.strip().strip('"')

    if populateEnv:
        for k, v in ret.items():
            os.environ.setdefault(k, v)
    return ret


def mergeConfigs(baseConfig: Dict[str, Any], newConfig: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two configuration dictionaries, dood!"""
    merged = baseConfig.copy()

    for key, value in newConfig.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = mergeConfigs(merged[key], value)
        else:
            merged[key] = value

    return merged


class ConfigManager:
    """Manages configuration loading for BOSS Geo client.

    Configuration is the built-in defaults, overridden by the TOML file (if
    given), with ${VAR} placeholders resolved from the environment and the
    optional .env file.
    """

    def __init__(self, configPath: Optional[str] = "config.toml", dotEnvFile: str = ".env"):
        """Initialize ConfigManager.

        Args:
            configPath: Path to TOML config file, None to use defaults only
            dotEnvFile: Path to .env file, silently skipped if absent

        Raises:
            ConfigurationError: If config file is missing or is not valid TOML
        """
        self.configPath = configPath
        loadDotEnv(path=dotEnvFile)
        self.config: Dict[str, Any] = substituteEnvVars(self._loadConfig())

    def _loadConfig(self) -> Dict[str, Any]:
        """Load configuration from TOML file on top of defaults."""
        if self.configPath is None:
            return DEFAULT_CONFIG

        configFile = Path(self.configPath)
        if not configFile.is_file():
            raise ConfigurationError(f"Configuration file {self.configPath} not found")

        try:
            with open(configFile, "rb") as f:
                fileConfig = tomli.load(f)
        except (OSError, tomli.TOMLDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration from {self.configPath}: {e}") from e

        logger.info(f"Loaded config from {self.configPath}")
        return mergeConfigs(DEFAULT_CONFIG, fileConfig)

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getBossGeoConfig(self) -> Dict[str, Any]:
        """Get BOSS Geo client configuration."""
        return self.get("boss-geo", {})

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging-specific configuration."""
        return self.get("logging", {})
