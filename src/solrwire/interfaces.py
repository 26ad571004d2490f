"""
Protocol definitions for the collaborators of the command layer.

The command layer drives these interfaces but does not own their
implementations. Using protocols allows any object with the right
methods to be injected, including test stubs.

Protocols:
    Connection: Performs a GET against a handler path and returns the body
    DocumentSerializer: Turns one document and its boost into a <doc> element
    QuerySerializer: Turns a query object into a query string
    QueryExecutor: Runs search and more-like-this queries
"""

from typing import Any, Optional, Protocol, Sequence, Tuple, TypeVar, runtime_checkable

from lxml import etree

T = TypeVar('T')

# (key, value) pairs sent as query-string parameters
Params = Sequence[Tuple[str, str]]


@runtime_checkable
class Connection(Protocol):
    """
    Protocol for the transport that talks to the search server.

    Example implementation:
        class EchoConnection:
            def get(self, handler: str, params: Params) -> str:
                return "<response/>"
    """

    def get(self, handler: str, params: Optional[Params]) -> str:
        """
        Perform a GET request against a handler path.

        Args:
            handler: Handler path such as "/update" or "/admin/ping".
            params: Query-string parameters, or None for no parameters.

        Returns:
            Raw response body as text.

        Raises:
            SolrTransportError: On network or protocol failure.
        """
        ...


@runtime_checkable
class DocumentSerializer(Protocol[T]):
    """Protocol for mapping a document to a Solr <doc> element."""

    def serialize(self, document: T, boost: Optional[float]) -> etree._Element:
        """
        Serialize a document.

        Args:
            document: The document to serialize.
            boost: Document boost, or None for the server default.

        Returns:
            A <doc> element holding one <field> per value.
        """
        ...


@runtime_checkable
class QuerySerializer(Protocol):
    """Protocol for rendering a query object as a query string."""

    def serialize(self, query: Any) -> str:
        ...


@runtime_checkable
class QueryExecutor(Protocol[T]):
    """
    Protocol for the component that executes search queries.

    The facade passes query objects and options through unchanged.
    """

    def execute(self, query: Any, options: Any) -> Any:
        """Run a search query and return its results."""
        ...

    def execute_more_like_this(self, query: Any, options: Any) -> Any:
        """Run a more-like-this handler query and return its results."""
        ...
