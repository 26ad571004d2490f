"""
CLI command implementations.
"""

from .base import BaseCommand, EXIT_OK, EXIT_TRANSPORT_ERROR, EXIT_RESPONSE_ERROR
from .admin import (
    PingCommand,
    CommitCommand,
    OptimizeCommand,
    RollbackCommand,
    DeleteCommand,
    SchemaCommand,
    ImportStatusCommand,
)

__all__ = [
    'BaseCommand',
    'EXIT_OK',
    'EXIT_TRANSPORT_ERROR',
    'EXIT_RESPONSE_ERROR',
    'PingCommand',
    'CommitCommand',
    'OptimizeCommand',
    'RollbackCommand',
    'DeleteCommand',
    'SchemaCommand',
    'ImportStatusCommand',
]
