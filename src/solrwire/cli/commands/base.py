"""
Base command class for CLI commands.

Each command builds its server from the parsed arguments, runs one
operation and returns a process exit code. Failures are reported on one
line and mapped to exit codes by category.
"""

import argparse
import logging
from abc import ABC, abstractmethod
from typing import Optional

from ...config import SolrConfig
from ...core.errors import SolrResponseError, SolrTransportError
from ...serializers import DictDocumentSerializer
from ...server import SolrBasicServer
from ..helpers import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TRANSPORT_ERROR = 1
EXIT_RESPONSE_ERROR = 2


class BaseCommand(ABC):
    """
    Base class for CLI commands.

    Subclasses implement run(); execute() wraps it with config loading,
    logging setup and error reporting.
    """

    def __init__(self, server: Optional[SolrBasicServer] = None):
        """
        Args:
            server: Server to use instead of one built from configuration
        """
        self._server = server
        self.config: Optional[SolrConfig] = None

    def load_config(self, args: argparse.Namespace) -> SolrConfig:
        """Build configuration from --config, then apply CLI overrides."""
        config_path = getattr(args, 'config', None)
        config = SolrConfig.from_file(config_path) if config_path else SolrConfig()
        overrides = {
            'base_url': getattr(args, 'url', None),
            'timeout': getattr(args, 'timeout', None),
            'log_level': getattr(args, 'log_level', None),
        }
        values = {
            'base_url': config.base_url,
            'timeout': config.timeout,
            'schema_file': config.schema_file,
            'log_level': config.log_level,
            'log_file': config.log_file,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return SolrConfig(**values)

    def get_server(self) -> SolrBasicServer:
        if self._server is None:
            self._server = SolrBasicServer(
                self.config.create_connection(),
                query_executor=None,
                document_serializer=DictDocumentSerializer(),
            )
        return self._server

    def execute(self, args: argparse.Namespace) -> int:
        """Run the command and map failures to exit codes."""
        try:
            self.config = self.load_config(args)
        except (ValueError, FileNotFoundError) as e:
            print(f"✗ Configuration error: {e}")
            return EXIT_TRANSPORT_ERROR
        setup_logging(self.config.log_level, self.config.log_file)

        try:
            return self.run(args)
        except SolrTransportError as e:
            logger.debug("Transport failure", exc_info=True)
            print(f"✗ Server unreachable: {e}")
            return EXIT_TRANSPORT_ERROR
        except SolrResponseError as e:
            logger.debug("Unexpected response", exc_info=True)
            print(f"✗ Unexpected response: {e}")
            return EXIT_RESPONSE_ERROR
        except ValueError as e:
            # Option objects validate their values on construction
            print(f"✗ Invalid option: {e}")
            return EXIT_TRANSPORT_ERROR

    @abstractmethod
    def run(self, args: argparse.Namespace) -> int:
        """Run the command against the server."""
        pass
