"""
Core infrastructure for the Solr command layer: the error taxonomy and
the bundled HTTP connection.

Usage:
    from solrwire.core import HttpConnection, SolrTransportError
"""

from .errors import (
    SolrError,
    SolrTransportError,
    UnsupportedCommandError,
    SolrResponseError,
    MalformedResponseError,
    ResponseParseError,
)
from .http_client import HttpConnection

__all__ = [
    "SolrError",
    "SolrTransportError",
    "UnsupportedCommandError",
    "SolrResponseError",
    "MalformedResponseError",
    "ResponseParseError",
    "HttpConnection",
]
