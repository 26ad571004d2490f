"""
CLI commands for status-only and administrative operations.
"""

import argparse
import logging

from ...commands import CommitOptions
from ...shared.models import ResponseHeader
from ..helpers import print_footer, print_header
from .base import EXIT_OK, EXIT_RESPONSE_ERROR, BaseCommand

logger = logging.getLogger(__name__)


def _report(action: str, header: ResponseHeader) -> int:
    if header.is_success:
        print(f"✓ {action} succeeded (status={header.status}, QTime={header.qtime}ms)")
        return EXIT_OK
    print(f"✗ {action} returned status {header.status}")
    return EXIT_RESPONSE_ERROR


def _commit_options(args: argparse.Namespace) -> CommitOptions:
    return CommitOptions(
        wait_searcher=getattr(args, 'wait_searcher', None),
        expunge_deletes=getattr(args, 'expunge_deletes', None),
        max_segments=getattr(args, 'max_segments', None),
    )


class PingCommand(BaseCommand):
    """Check that the server answers."""

    def run(self, args: argparse.Namespace) -> int:
        return _report("Ping", self.get_server().ping())


class CommitCommand(BaseCommand):
    """Commit pending changes."""

    def run(self, args: argparse.Namespace) -> int:
        return _report("Commit", self.get_server().commit(_commit_options(args)))


class OptimizeCommand(BaseCommand):
    """Optimize the index."""

    def run(self, args: argparse.Namespace) -> int:
        return _report("Optimize", self.get_server().optimize(_commit_options(args)))


class RollbackCommand(BaseCommand):
    """Discard uncommitted changes."""

    def run(self, args: argparse.Namespace) -> int:
        return _report("Rollback", self.get_server().rollback())


class DeleteCommand(BaseCommand):
    """Delete documents by id and/or query."""

    def run(self, args: argparse.Namespace) -> int:
        ids = args.id or []
        if not ids and args.query is None:
            logger.warning("Neither --id nor --query given; sending an empty delete")
        return _report("Delete", self.get_server().delete(ids, args.query))


class SchemaCommand(BaseCommand):
    """Print the fields declared in the schema."""

    def run(self, args: argparse.Namespace) -> int:
        file_name = args.file or self.config.schema_file
        schema = self.get_server().get_schema(file_name)

        print_header(f"SCHEMA: {schema.name or file_name} (version {schema.version or '?'})")
        print(f"Unique key: {schema.unique_key or '-'}")
        print(f"Field types: {len(schema.field_types)}")
        print(f"Fields ({len(schema.fields)}):")
        for item in schema.fields:
            flags = [
                flag for flag, on in (
                    ("required", item.is_required),
                    ("multi", item.is_multi_valued),
                    ("stored", item.is_stored),
                    ("indexed", item.is_indexed),
                ) if on
            ]
            print(f"  - {item.name}: {item.field_type.name} [{', '.join(flags)}]")
        if schema.dynamic_fields:
            print(f"Dynamic fields: {', '.join(d.name for d in schema.dynamic_fields)}")
        for copy in schema.copy_fields:
            print(f"  copy {copy.source} -> {copy.destination}")
        print_footer()
        return EXIT_OK


class ImportStatusCommand(BaseCommand):
    """Show the data import handler status."""

    def run(self, args: argparse.Namespace) -> int:
        params = [("command", args.command)] if args.command else []
        status = self.get_server().get_import_status(params)

        print_header(f"DATA IMPORT: {status.status.value}")
        if status.summary:
            print(status.summary)
        for label, value in status.messages.items():
            if label:
                print(f"  {label}: {value}")
        print_footer()
        return EXIT_OK
