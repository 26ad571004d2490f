"""
Simple serializers for documents held as mappings and for string queries.

Richer document mapping (typed attributes, field-name conventions) is
expected to be supplied by the caller through the DocumentSerializer protocol.
"""

import logging
from datetime import date, datetime
from typing import Any, Mapping, Optional

from lxml import etree

logger = logging.getLogger(__name__)


def format_field_value(value: Any) -> str:
    """Render a single field value in the form Solr expects.

    Args:
        value: Python value (bool, number, date, datetime or anything with str())

    Returns:
        The wire representation of the value.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%dT00:00:00Z")
    return str(value)


class DictDocumentSerializer:
    """
    Serializes mapping documents into <doc> elements.

    Each key becomes a <field name="key">; list, tuple and set values become
    one <field> per item, and None values are skipped.

    Example:
        >>> serializer = DictDocumentSerializer()
        >>> doc = serializer.serialize({"id": "1", "cat": ["a", "b"]}, 2.0)
        >>> etree.tostring(doc)
        b'<doc boost="2.0"><field name="id">1</field><field name="cat">a</field><field name="cat">b</field></doc>'
    """

    def serialize(self, document: Mapping[str, Any], boost: Optional[float]) -> etree._Element:
        doc = etree.Element("doc")
        if boost is not None:
            doc.set("boost", str(float(boost)))
        for name, value in document.items():
            values = value if isinstance(value, (list, tuple, set, frozenset)) else [value]
            for item in values:
                if item is None:
                    continue
                field_el = etree.SubElement(doc, "field", name=name)
                field_el.text = format_field_value(item)
        return doc


class PassThroughQuerySerializer:
    """Query serializer for queries that are already query strings."""

    def serialize(self, query: Any) -> str:
        if query is None:
            raise ValueError("query cannot be None")
        return str(query)
