"""
Data import handler status parser.

The /dataimport handler answers a status command with:

    <response>
      <lst name="responseHeader">...</lst>
      <str name="command">status</str>
      <str name="status">idle</str>
      <str name="importResponse"/>
      <lst name="statusMessages">
        <str name="Total Rows Fetched">10</str>
        <str name="Full Dump Started">2010-06-07 13:47:12</str>
        <str name="">Indexing completed. Added/Updated: 10 documents.</str>
        ...
      </lst>
    </response>
"""

import logging
from datetime import datetime
from typing import Dict, Optional

from lxml import etree

from ..core.errors import ResponseParseError
from ..shared.models import ImportState, ImportStatus
from .xml import find_named, named_text

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Status message label -> (ImportStatus attribute, value kind)
STATUS_MESSAGE_FIELDS: Dict[str, tuple] = {
    "Time Elapsed": ("time_elapsed", "text"),
    "Total Requests made to DataSource": ("total_requests_to_data_source", "int"),
    "Total Rows Fetched": ("total_rows_fetched", "int"),
    "Total Documents Processed": ("total_documents_processed", "int"),
    "Total Documents Skipped": ("total_documents_skipped", "int"),
    "Total Documents Failed": ("total_documents_failed", "int"),
    "Full Dump Started": ("full_dump_started", "datetime"),
    "Delta Dump started": ("delta_dump_started", "datetime"),
    "Committed": ("committed", "datetime"),
    "Optimized": ("optimized", "datetime"),
    "Time taken": ("time_taken", "text"),
}


def _convert(label: str, raw: str, kind: str):
    value = raw.strip()
    if kind == "int":
        try:
            return int(value)
        except ValueError:
            raise ResponseParseError(label, f"Status message '{label}' is not numeric: {raw!r}") from None
    if kind == "datetime":
        try:
            return datetime.strptime(value, TIMESTAMP_FORMAT)
        except ValueError:
            raise ResponseParseError(
                label, f"Status message '{label}' is not a {TIMESTAMP_FORMAT} timestamp: {raw!r}"
            ) from None
    return value


class ImportStatusParser:
    """Parses data import handler status responses into ImportStatus objects."""

    def parse(self, root: etree._Element) -> ImportStatus:
        raw_status = named_text(root, "str", "status")
        if raw_status is None:
            raise ResponseParseError("status", "Expected <str name=\"status\"> in data import response")

        result = ImportStatus(
            status=ImportState.from_wire(raw_status),
            command=named_text(root, "str", "command"),
            import_response=named_text(root, "str", "importResponse"),
        )

        messages = find_named(root, "lst", "statusMessages")
        if messages is not None:
            for child in messages:
                if child.tag != "str":
                    continue
                label = child.get("name", "")
                text = child.text or ""
                result.messages[label] = text
                self._apply_message(result, label, text)

        logger.debug(f"Parsed data import status: {result.status.value}")
        return result

    @staticmethod
    def _apply_message(result: ImportStatus, label: str, text: str) -> None:
        if label == "":
            result.summary = text
            return
        # Some Solr versions pad labels ("Time taken ")
        mapping: Optional[tuple] = STATUS_MESSAGE_FIELDS.get(label.strip())
        if mapping is None:
            return
        attribute, kind = mapping
        setattr(result, attribute, _convert(label.strip(), text, kind))
