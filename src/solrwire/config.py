"""
Configuration for connecting to a Solr server.

Configuration is read from a JSON object, typically a config.json file:

    {
        "base_url": "http://localhost:8983/solr/core0",
        "timeout": 30,
        "schema_file": "schema.xml",
        "log_level": "INFO",
        "log_file": null
    }
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .core.http_client import HttpConnection

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Dictionary containing the configuration.

    Raises:
        ValueError: If config_path is empty, not a .json file or contains invalid JSON.
        FileNotFoundError: If the configuration file doesn't exist.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    path = Path(config_path)
    if path.suffix.lower() != ".json":
        raise ValueError(f"Configuration file must have a .json extension: {config_path}")
    if not path.is_file():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Please create a config.json file or specify one with --config"
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in configuration file {path} at line {e.lineno}, column {e.colno}: {e.msg}"
        )
    except UnicodeDecodeError as e:
        raise ValueError(f"File encoding error in {path}: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(config)}")

    return config


@dataclass
class SolrConfig:
    """Connection and logging settings.

    Attributes:
        base_url: Core URL, e.g. http://localhost:8983/solr/core0
        timeout: Request timeout in seconds (default: 30)
        schema_file: Schema file fetched by the schema command (default: schema.xml)
        log_level: Logging level name (default: INFO)
        log_file: Optional log file path
    """
    base_url: str = "http://localhost:8983/solr"
    timeout: float = 30.0
    schema_file: str = "schema.xml"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration values."""
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL: {self.base_url}")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if not self.schema_file:
            raise ValueError("schema_file cannot be empty")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")

    @classmethod
    def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> 'SolrConfig':
        """Create config from dictionary.

        Args:
            config_dict: Configuration dictionary (can be None for defaults)

        Returns:
            SolrConfig instance
        """
        if config_dict is None:
            return cls()

        unknown = set(config_dict) - {"base_url", "timeout", "schema_file", "log_level", "log_file"}
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")

        return cls(
            base_url=config_dict.get('base_url', cls.base_url),
            timeout=float(config_dict.get('timeout', cls.timeout)),
            schema_file=config_dict.get('schema_file', cls.schema_file),
            log_level=config_dict.get('log_level', cls.log_level),
            log_file=config_dict.get('log_file'),
        )

    @classmethod
    def from_file(cls, config_path: str) -> 'SolrConfig':
        """Create config from a JSON configuration file."""
        return cls.from_dict(load_config(config_path))

    def create_connection(self) -> HttpConnection:
        """Build an HTTP connection from these settings."""
        return HttpConnection(self.base_url, timeout=self.timeout)
