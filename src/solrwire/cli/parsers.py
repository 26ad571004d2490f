"""
Argument parsing configuration for the solrwire CLI.
"""

import argparse


def _bool_flag(parser: argparse.ArgumentParser, name: str, help_text: str) -> None:
    dest = name.replace('-', '_')
    group = parser.add_mutually_exclusive_group()
    group.add_argument(f'--{name}', dest=dest, action='store_true', default=None, help=help_text)
    group.add_argument(f'--no-{name}', dest=dest, action='store_false', default=None,
                       help=f"Disable --{name}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog='solrwire',
        description='Send administrative commands to a Solr server',
    )
    parser.add_argument('--config', help='Path to a JSON configuration file')
    parser.add_argument('--url', help='Core URL, e.g. http://localhost:8983/solr/core0')
    parser.add_argument('--timeout', type=float, help='Request timeout in seconds')
    parser.add_argument('--log-level', dest='log_level',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])

    subparsers = parser.add_subparsers(dest='command_name', required=True)

    subparsers.add_parser('ping', help='Check that the server answers')
    subparsers.add_parser('rollback', help='Discard uncommitted changes')

    commit = subparsers.add_parser('commit', help='Commit pending changes')
    _bool_flag(commit, 'wait-searcher', 'Wait for a new searcher to open')
    _bool_flag(commit, 'expunge-deletes', 'Merge away segments with deletes')

    optimize = subparsers.add_parser('optimize', help='Optimize the index')
    _bool_flag(optimize, 'wait-searcher', 'Wait for a new searcher to open')
    optimize.add_argument('--max-segments', dest='max_segments', type=int,
                          help='Merge down to at most this many segments')

    delete = subparsers.add_parser('delete', help='Delete documents by id and/or query')
    delete.add_argument('--id', action='append', help='Document id (repeatable)')
    delete.add_argument('--query', help='Delete documents matching this query')

    schema = subparsers.add_parser('schema', help='Show schema fields')
    schema.add_argument('--file', help='Schema file name (default from config)')

    import_status = subparsers.add_parser('import-status', help='Show data import status')
    import_status.add_argument('--command', default='status',
                               help='Data import command to send (default: status)')

    return parser
