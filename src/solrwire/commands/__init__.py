"""
Command variants, option objects and wire encoding.

Usage:
    from solrwire.commands import CommitCommand, CommitOptions, execute_command
"""

from .parameters import (
    AddParameters,
    CommitOptions,
    DeleteByIdAndOrQuery,
    DeleteParameters,
    ExtractFormat,
    ExtractParameters,
)
from .commands import (
    EXTRACT_HANDLER,
    PING_HANDLER,
    UPDATE_HANDLER,
    AddCommand,
    CommitCommand,
    DeleteCommand,
    ExtractCommand,
    OptimizeCommand,
    PingCommand,
    RollbackCommand,
    WireRequest,
    encode_command,
    execute_command,
    get_encoder,
    register_encoder,
)

__all__ = [
    # Options
    "AddParameters",
    "CommitOptions",
    "DeleteByIdAndOrQuery",
    "DeleteParameters",
    "ExtractFormat",
    "ExtractParameters",
    # Commands
    "AddCommand",
    "CommitCommand",
    "DeleteCommand",
    "ExtractCommand",
    "OptimizeCommand",
    "PingCommand",
    "RollbackCommand",
    # Encoding
    "WireRequest",
    "encode_command",
    "execute_command",
    "get_encoder",
    "register_encoder",
    # Handler paths
    "UPDATE_HANDLER",
    "EXTRACT_HANDLER",
    "PING_HANDLER",
]
