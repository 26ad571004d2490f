"""
Protocol definitions for response parsers.

Parsers are pure functions of a parsed XML root: they hold no state, never
perform I/O, and raise ResponseParseError when the XML lacks what they need.
The facade receives parser instances at construction, so any object with a
matching parse method can replace the bundled implementations.

Protocols:
    HeaderParserProtocol: Status envelope -> ResponseHeader
    ExtractParserProtocol: Extraction response -> ExtractResponse
    SchemaParserProtocol: schema.xml -> SolrSchema
    ImportStatusParserProtocol: Data import status -> ImportStatus
"""

from typing import Protocol, runtime_checkable

from lxml import etree

from ..shared.models import ExtractResponse, ImportStatus, ResponseHeader, SolrSchema


@runtime_checkable
class HeaderParserProtocol(Protocol):
    """Protocol for parsing the status envelope of a response."""

    def parse(self, root: etree._Element) -> ResponseHeader:
        """
        Parse the response header.

        Args:
            root: Root element of the response document.

        Returns:
            The status and elapsed time of the response.

        Raises:
            ResponseParseError: If the envelope or one of its fields is missing.
        """
        ...


@runtime_checkable
class ExtractParserProtocol(Protocol):
    """Protocol for parsing extracting request handler responses."""

    def parse(self, root: etree._Element) -> ExtractResponse:
        ...


@runtime_checkable
class SchemaParserProtocol(Protocol):
    """Protocol for parsing schema files."""

    def parse(self, root: etree._Element) -> SolrSchema:
        ...


@runtime_checkable
class ImportStatusParserProtocol(Protocol):
    """Protocol for parsing data import handler status responses."""

    def parse(self, root: etree._Element) -> ImportStatus:
        ...
