"""
Command-line interface for solrwire.

- commands/: Command implementations
- parsers.py: Argument parsing configuration
- helpers.py: Logging setup and output helpers
- main.py: Entry point
"""

from .helpers import setup_logging
from .parsers import create_argument_parser
from .main import COMMAND_MAP, main

__all__ = [
    'setup_logging',
    'create_argument_parser',
    'COMMAND_MAP',
    'main',
]
