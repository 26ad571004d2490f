"""
Exception hierarchy for the Solr command layer.

Callers can tell three failure categories apart:

- SolrTransportError: the server could not be reached or refused the request
- MalformedResponseError: the server answered with text that is not XML
- ResponseParseError: the XML is well-formed but not the expected shape

Usage:
    from solrwire.core.errors import SolrTransportError, SolrResponseError

    try:
        header = server.ping()
    except SolrTransportError as e:
        print(f"Server unreachable (HTTP {e.status_code})")
    except SolrResponseError as e:
        print(f"Unexpected response: {e}")
"""

from typing import Optional


class SolrError(Exception):
    """Base exception for all errors raised by this package."""
    pass


class SolrTransportError(SolrError):
    """Raised when the connection fails to deliver a response body.

    Attributes:
        status_code: HTTP status code, or a synthetic one for network errors
        message: Human-readable error message
        body: Response body returned by the server, if any
    """

    def __init__(self, status_code: int, message: str, body: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(f"{message} (HTTP {status_code})")


class UnsupportedCommandError(SolrError):
    """Raised when no wire encoder is registered for a command type."""

    def __init__(self, command_type: type):
        self.command_type = command_type
        super().__init__(f"No encoder registered for command type '{command_type.__name__}'")


class SolrResponseError(SolrError):
    """Base exception for responses that arrived but could not be used."""
    pass


class MalformedResponseError(SolrResponseError):
    """Raised when the response text is not well-formed XML.

    Attributes:
        message: Description of the XML syntax problem
        snippet: Leading part of the offending response text
    """

    SNIPPET_LENGTH = 200

    def __init__(self, message: str, text: Optional[str] = None):
        self.message = message
        self.snippet = (text or "")[:self.SNIPPET_LENGTH]
        super().__init__(f"Malformed response: {message}")


class ResponseParseError(SolrResponseError):
    """Raised when well-formed XML lacks a field a parser requires.

    Attributes:
        field: Name of the missing or invalid field (e.g. "QTime")
        message: Description of what was expected
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"[{field}] {message}")
