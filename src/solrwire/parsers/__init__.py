"""
Response parsers for the Solr command layer.

Usage:
    from solrwire.parsers import HeaderResponseParser, parse_xml

    header = HeaderResponseParser().parse(parse_xml(body))
"""

from .xml import parse_xml
from .protocols import (
    HeaderParserProtocol,
    ExtractParserProtocol,
    SchemaParserProtocol,
    ImportStatusParserProtocol,
)
from .header import HeaderResponseParser
from .extract import ExtractResponseParser
from .schema import SchemaParser
from .import_status import ImportStatusParser

__all__ = [
    "parse_xml",
    # Protocols
    "HeaderParserProtocol",
    "ExtractParserProtocol",
    "SchemaParserProtocol",
    "ImportStatusParserProtocol",
    # Implementations
    "HeaderResponseParser",
    "ExtractResponseParser",
    "SchemaParser",
    "ImportStatusParser",
]
