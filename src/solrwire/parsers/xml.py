"""
XML parsing helpers shared by the response parsers.

parse_xml is the single place where response text becomes an element tree;
text that is not well-formed XML raises MalformedResponseError before any
response parser runs.
"""

import logging
from typing import Optional

from lxml import etree

from ..core.errors import MalformedResponseError, ResponseParseError

logger = logging.getLogger(__name__)


def _make_parser() -> etree.XMLParser:
    # Bodies are always re-encoded as UTF-8, whatever the prolog declares
    return etree.XMLParser(
        encoding="utf-8", resolve_entities=False, no_network=True, huge_tree=False
    )


def parse_xml(text: Optional[str]) -> etree._Element:
    """Parse response text into its root element.

    Args:
        text: Raw response body

    Returns:
        Root element of the document

    Raises:
        MalformedResponseError: If the text is empty or not well-formed XML
    """
    if text is None or not text.strip():
        raise MalformedResponseError("empty response body", text)
    try:
        return etree.fromstring(text.encode("utf-8"), parser=_make_parser())
    except etree.XMLSyntaxError as e:
        logger.debug(f"Response is not well-formed XML: {e}")
        raise MalformedResponseError(str(e), text) from e


def find_named(parent: etree._Element, tag: str, name: str) -> Optional[etree._Element]:
    """Find a direct child such as <int name="QTime">.

    Uses explicit iteration so names containing quotes need no escaping.
    """
    for child in parent:
        if child.tag == tag and child.get("name") == name:
            return child
    return None


def named_text(parent: etree._Element, tag: str, name: str) -> Optional[str]:
    """Text of a named direct child, "" for an empty element, None when absent."""
    child = find_named(parent, tag, name)
    if child is None:
        return None
    return child.text or ""


def required_int(parent: etree._Element, name: str, tags=("int", "long")) -> int:
    """Read a named integer child, failing when absent or non-numeric.

    Raises:
        ResponseParseError: Naming the field that was missing or invalid
    """
    child = None
    for tag in tags:
        child = find_named(parent, tag, name)
        if child is not None:
            break
    if child is None:
        raise ResponseParseError(name, f"Required field '{name}' not found in response header")
    try:
        return int((child.text or "").strip())
    except ValueError:
        raise ResponseParseError(
            name, f"Field '{name}' is not numeric: {child.text!r}"
        ) from None
