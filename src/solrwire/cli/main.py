"""
Entry point for the solrwire CLI.

Usage:
    solrwire --url http://localhost:8983/solr/core0 ping
    solrwire --config config.json commit --wait-searcher
    solrwire optimize --max-segments 1
    solrwire delete --id 1 --id 2
    solrwire schema --file managed-schema
    solrwire import-status
"""

import sys
from typing import List, Optional

from .commands import (
    CommitCommand,
    DeleteCommand,
    ImportStatusCommand,
    OptimizeCommand,
    PingCommand,
    RollbackCommand,
    SchemaCommand,
)
from .parsers import create_argument_parser

# Command mapping from command name to Command class
COMMAND_MAP = {
    'ping': PingCommand,
    'commit': CommitCommand,
    'optimize': OptimizeCommand,
    'rollback': RollbackCommand,
    'delete': DeleteCommand,
    'schema': SchemaCommand,
    'import-status': ImportStatusCommand,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    command = COMMAND_MAP[args.command_name]()
    return command.execute(args)


if __name__ == '__main__':
    sys.exit(main())
