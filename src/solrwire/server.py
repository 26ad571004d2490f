"""
Low-level dispatcher and basic operations facade.

LowLevelSolr is the single choke-point every request passes through: it
sends commands (or raw handler requests) through the connection and routes
every header-shaped response through the injected header parser.

SolrBasicServer composes commands, the dispatcher and the response parsers
into the typed, document-generic operations callers use. Schema and data
import status reads address fixed administrative handlers directly and do
not go through the command abstraction.

Usage:
    from solrwire import HttpConnection, SolrBasicServer, DictDocumentSerializer

    server = SolrBasicServer(
        HttpConnection("http://localhost:8983/solr/core0"),
        query_executor=executor,
        document_serializer=DictDocumentSerializer(),
    )
    server.add([{"id": "1", "title": "hello"}])
    server.commit()
"""

import logging
from typing import Any, Generic, Iterable, Optional, Tuple, TypeVar

from lxml import etree

from .commands import (
    AddCommand,
    AddParameters,
    CommitCommand,
    CommitOptions,
    DeleteByIdAndOrQuery,
    DeleteCommand,
    DeleteParameters,
    ExtractCommand,
    ExtractParameters,
    OptimizeCommand,
    PingCommand,
    RollbackCommand,
    execute_command,
)
from .interfaces import Connection, DocumentSerializer, Params, QueryExecutor, QuerySerializer
from .parsers import (
    ExtractParserProtocol,
    ExtractResponseParser,
    HeaderParserProtocol,
    HeaderResponseParser,
    ImportStatusParser,
    ImportStatusParserProtocol,
    SchemaParser,
    SchemaParserProtocol,
    parse_xml,
)
from .serializers import PassThroughQuerySerializer
from .shared.models import ExtractResponse, ImportStatus, ResponseHeader, SolrSchema

logger = logging.getLogger(__name__)

T = TypeVar('T')

SCHEMA_FILE_HANDLER = "/admin/file"
DATA_IMPORT_HANDLER = "/dataimport"


class LowLevelSolr:
    """
    Sends commands and raw handler requests through a connection.

    Each header-returning call performs exactly one round trip and one parse
    pass, and raises if either fails; it never returns a partial header.

    Attributes:
        connection: Transport requests are sent through.
        header_parser: Parser for status envelopes.
    """

    def __init__(self, connection: Connection, header_parser: Optional[HeaderParserProtocol] = None):
        """
        Args:
            connection: Transport to send requests through
            header_parser: Parser for status envelopes (defaults to HeaderResponseParser)
        """
        if connection is None:
            raise ValueError("connection cannot be None")
        self.connection = connection
        self.header_parser = header_parser or HeaderResponseParser()

    def send(self, command: Any) -> str:
        """Execute a command and return the raw response text unmodified.

        Raises:
            SolrTransportError: If the connection fails
            UnsupportedCommandError: If the command type has no encoder
        """
        return execute_command(command, self.connection)

    def send_and_parse_header(self, command: Any) -> ResponseHeader:
        """Execute a command and parse its response header.

        Raises:
            SolrTransportError: If the connection fails
            MalformedResponseError: If the response is not well-formed XML
            ResponseParseError: If the XML lacks the header envelope or its fields
        """
        return self.header_parser.parse(parse_xml(self.send(command)))

    def request_raw(self, handler: str, params: Optional[Params]) -> str:
        """GET a handler directly and return the raw response text."""
        logger.debug(f"Raw request: GET {handler}")
        return self.connection.get(handler, params)

    def request_xml(self, handler: str, params: Optional[Params]) -> etree._Element:
        """GET a handler directly and return the parsed response root."""
        return parse_xml(self.request_raw(handler, params))

    def request_and_parse_header(self, handler: str, params: Optional[Params]) -> ResponseHeader:
        """GET a handler directly and parse the response header."""
        return self.header_parser.parse(self.request_xml(handler, params))


class SolrBasicServer(LowLevelSolr, Generic[T]):
    """
    Typed basic operations for documents of type T.

    Options arguments default to a freshly constructed options object on
    every call; no default instance is cached or shared.

    Example:
        >>> server = SolrBasicServer(connection, executor, DictDocumentSerializer())
        >>> server.delete(["1", "2"])
        ResponseHeader(status=0, qtime=3, params={})
    """

    def __init__(
        self,
        connection: Connection,
        query_executor: Optional[QueryExecutor[T]],
        document_serializer: DocumentSerializer[T],
        schema_parser: Optional[SchemaParserProtocol] = None,
        header_parser: Optional[HeaderParserProtocol] = None,
        query_serializer: Optional[QuerySerializer] = None,
        import_status_parser: Optional[ImportStatusParserProtocol] = None,
        extract_response_parser: Optional[ExtractParserProtocol] = None,
    ):
        """
        Args:
            connection: Transport to send requests through
            query_executor: Executes search and more-like-this queries (None disables queries)
            document_serializer: Serializes documents for add requests
            schema_parser: Parser for schema files
            header_parser: Parser for status envelopes
            query_serializer: Renders delete-by-query queries
            import_status_parser: Parser for data import status responses
            extract_response_parser: Parser for extraction responses
        """
        super().__init__(connection, header_parser)
        self.query_executor = query_executor
        self.document_serializer = document_serializer
        self.schema_parser = schema_parser or SchemaParser()
        self.query_serializer = query_serializer or PassThroughQuerySerializer()
        self.import_status_parser = import_status_parser or ImportStatusParser()
        self.extract_response_parser = extract_response_parser or ExtractResponseParser(self.header_parser)

    # =========================================================================
    # Update operations
    # =========================================================================

    def commit(self, options: Optional[CommitOptions] = None) -> ResponseHeader:
        """Commit pending changes."""
        options = options or CommitOptions()
        cmd = CommitCommand(
            wait_flush=options.wait_flush,
            wait_searcher=options.wait_searcher,
            expunge_deletes=options.expunge_deletes,
        )
        return self.send_and_parse_header(cmd)

    def optimize(self, options: Optional[CommitOptions] = None) -> ResponseHeader:
        """Commit and merge segments, down to options.max_segments if set."""
        options = options or CommitOptions()
        cmd = OptimizeCommand(
            wait_flush=options.wait_flush,
            wait_searcher=options.wait_searcher,
            expunge_deletes=options.expunge_deletes,
            max_segments=options.max_segments,
        )
        return self.send_and_parse_header(cmd)

    def rollback(self) -> ResponseHeader:
        return self.send_and_parse_header(RollbackCommand())

    def add_with_boost(
        self,
        docs: Iterable[Tuple[T, Optional[float]]],
        parameters: Optional[AddParameters] = None,
    ) -> ResponseHeader:
        """Add documents, each with an optional boost (None for the default)."""
        cmd = AddCommand.create(docs, self.document_serializer, parameters)
        return self.send_and_parse_header(cmd)

    def add(self, docs: Iterable[T], parameters: Optional[AddParameters] = None) -> ResponseHeader:
        """Add documents with the default boost."""
        return self.add_with_boost(((doc, None) for doc in docs), parameters)

    def delete(
        self,
        ids: Optional[Iterable[str]],
        query: Any = None,
        parameters: Optional[DeleteParameters] = None,
    ) -> ResponseHeader:
        """Delete documents by id, by query, or both.

        Neither ids nor a query is a valid no-op request.

        Raises:
            TypeError: If ids is a single string rather than a collection
        """
        target = DeleteByIdAndOrQuery.create(ids, query, self.query_serializer)
        cmd = DeleteCommand(target=target, parameters=parameters or DeleteParameters())
        return self.send_and_parse_header(cmd)

    def ping(self) -> ResponseHeader:
        return self.send_and_parse_header(PingCommand())

    # =========================================================================
    # Extraction
    # =========================================================================

    def extract(self, parameters: ExtractParameters) -> ExtractResponse:
        """Send content through the extracting request handler."""
        if parameters is None:
            raise ValueError("parameters cannot be None")
        return self.send_and_parse_extract(ExtractCommand(parameters))

    def send_and_parse_extract(self, command: Any) -> ExtractResponse:
        """Execute a command and parse its response as an extraction result."""
        return self.extract_response_parser.parse(parse_xml(self.send(command)))

    # =========================================================================
    # Administrative reads
    # =========================================================================

    def get_schema(self, schema_file_name: str) -> SolrSchema:
        """Fetch and parse a schema file through the admin file handler."""
        if not schema_file_name:
            raise ValueError("schema_file_name cannot be empty")
        body = self.connection.get(SCHEMA_FILE_HANDLER, [("file", schema_file_name)])
        return self.schema_parser.parse(parse_xml(body))

    def get_import_status(self, options: Optional[Params] = None) -> ImportStatus:
        """Fetch the data import handler status.

        Args:
            options: Parameters passed to the handler unchanged
        """
        params = list(options) if options is not None else []
        body = self.connection.get(DATA_IMPORT_HANDLER, params)
        return self.import_status_parser.parse(parse_xml(body))

    # =========================================================================
    # Queries
    # =========================================================================

    def query(self, query: Any, options: Any = None) -> Any:
        return self._require_executor().execute(query, options)

    def more_like_this(self, query: Any, options: Any = None) -> Any:
        return self._require_executor().execute_more_like_this(query, options)

    def _require_executor(self) -> QueryExecutor[T]:
        if self.query_executor is None:
            raise RuntimeError("No query executor configured for this server")
        return self.query_executor
