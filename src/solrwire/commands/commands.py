"""
Command variants and their wire encoding.

Each command is an immutable value object that holds only the fields its
request needs. A registry maps every command type to one encoder function
that produces the handler path and parameter list; execute_command looks the
encoder up and drives the connection. Commands never parse responses.

Usage:
    from solrwire.commands import CommitCommand, execute_command

    body = execute_command(CommitCommand(wait_searcher=False), connection)

New command types register their own encoder:

    @register_encoder(MyCommand)
    def _encode_my_command(cmd: MyCommand) -> WireRequest:
        return WireRequest("/my/handler", [("key", cmd.value)])
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from lxml import etree

from ..core.errors import UnsupportedCommandError
from ..interfaces import Connection, DocumentSerializer
from .parameters import (
    AddParameters,
    DeleteByIdAndOrQuery,
    DeleteParameters,
    ExtractParameters,
)

logger = logging.getLogger(__name__)

C = TypeVar('C')

UPDATE_HANDLER = "/update"
EXTRACT_HANDLER = "/update/extract"
PING_HANDLER = "/admin/ping"


@dataclass(frozen=True)
class WireRequest:
    """
    A serialized request: handler path plus ordered string parameters.

    Attributes:
        handler: Handler path the request targets.
        params: Ordered (key, value) pairs.
    """
    handler: str
    params: List[Tuple[str, str]] = field(default_factory=list)

    def param_values(self, key: str) -> List[str]:
        """Get every value sent for a parameter key."""
        return [v for k, v in self.params if k == key]


# =============================================================================
# Command variants
# =============================================================================

@dataclass(frozen=True)
class CommitCommand:
    """Commit pending changes."""
    wait_flush: Optional[bool] = None
    wait_searcher: Optional[bool] = None
    expunge_deletes: Optional[bool] = None


@dataclass(frozen=True)
class OptimizeCommand:
    """Commit and merge index segments."""
    wait_flush: Optional[bool] = None
    wait_searcher: Optional[bool] = None
    expunge_deletes: Optional[bool] = None
    max_segments: Optional[int] = None


@dataclass(frozen=True)
class RollbackCommand:
    """Discard changes made since the last commit."""
    pass


@dataclass(frozen=True)
class AddCommand:
    """
    Add or replace documents.

    Attributes:
        documents: (document, boost) pairs; a None boost means the default boost.
        serializer: Turns each pair into a <doc> element.
        parameters: Add options.
    """
    documents: Tuple[Tuple[Any, Optional[float]], ...]
    serializer: DocumentSerializer
    parameters: AddParameters = field(default_factory=AddParameters)

    @classmethod
    def create(
        cls,
        documents: Iterable[Tuple[Any, Optional[float]]],
        serializer: DocumentSerializer,
        parameters: Optional[AddParameters] = None,
    ) -> 'AddCommand':
        """Build from any iterable of pairs, defaulting absent parameters."""
        return cls(
            documents=tuple((doc, boost) for doc, boost in documents),
            serializer=serializer,
            parameters=parameters or AddParameters(),
        )


@dataclass(frozen=True)
class DeleteCommand:
    """Delete documents by id, by query, or both."""
    target: DeleteByIdAndOrQuery
    parameters: DeleteParameters = field(default_factory=DeleteParameters)


@dataclass(frozen=True)
class ExtractCommand:
    """Send content through the extracting request handler."""
    parameters: ExtractParameters


@dataclass(frozen=True)
class PingCommand:
    """Check that the server is up."""
    pass


# =============================================================================
# Encoder registry
# =============================================================================

Encoder = Callable[[Any], WireRequest]

_ENCODERS: Dict[type, Encoder] = {}


def register_encoder(command_type: Type[C]) -> Callable[[Callable[[C], WireRequest]], Callable[[C], WireRequest]]:
    """Decorator registering the wire encoder for a command type.

    Args:
        command_type: Command class the encoder handles

    Returns:
        Decorator that stores the function and returns it unchanged
    """
    def decorator(func: Callable[[C], WireRequest]) -> Callable[[C], WireRequest]:
        if command_type in _ENCODERS:
            logger.debug(f"Replacing encoder for {command_type.__name__}")
        _ENCODERS[command_type] = func
        return func
    return decorator


def get_encoder(command_type: type) -> Encoder:
    """Look up the encoder for a command type.

    Raises:
        UnsupportedCommandError: If no encoder is registered
    """
    try:
        return _ENCODERS[command_type]
    except KeyError:
        raise UnsupportedCommandError(command_type) from None


def encode_command(command: Any) -> WireRequest:
    """Serialize a command into its wire request."""
    return get_encoder(type(command))(command)


def execute_command(command: Any, connection: Connection) -> str:
    """Send a command through a connection and return the raw body.

    Transport errors raised by the connection propagate unchanged.

    Args:
        command: Any command with a registered encoder
        connection: Transport to send the request through

    Returns:
        Raw response text, unmodified
    """
    request = encode_command(command)
    logger.debug(
        f"{type(command).__name__}: GET {request.handler} "
        f"params={[k for k, _ in request.params]}"
    )
    return connection.get(request.handler, request.params)


# =============================================================================
# Encoding helpers
# =============================================================================

def format_bool(value: bool) -> str:
    """Literal wire form of a boolean."""
    return "true" if value else "false"


def _append_flag(params: List[Tuple[str, str]], key: str, value: Optional[bool]) -> None:
    if value is not None:
        params.append((key, format_bool(value)))


def _append_value(params: List[Tuple[str, str]], key: str, value: Any) -> None:
    if value is not None:
        params.append((key, str(value)))


def _xml_body(element: etree._Element) -> str:
    return etree.tostring(element, encoding="unicode")


def _commit_params(action: str, cmd: Any) -> List[Tuple[str, str]]:
    params = [(action, "true")]
    _append_flag(params, "waitFlush", cmd.wait_flush)
    _append_flag(params, "waitSearcher", cmd.wait_searcher)
    _append_flag(params, "expungeDeletes", cmd.expunge_deletes)
    return params


# =============================================================================
# Encoders
# =============================================================================

@register_encoder(CommitCommand)
def _encode_commit(cmd: CommitCommand) -> WireRequest:
    return WireRequest(UPDATE_HANDLER, _commit_params("commit", cmd))


@register_encoder(OptimizeCommand)
def _encode_optimize(cmd: OptimizeCommand) -> WireRequest:
    params = _commit_params("optimize", cmd)
    _append_value(params, "maxSegments", cmd.max_segments)
    return WireRequest(UPDATE_HANDLER, params)


@register_encoder(RollbackCommand)
def _encode_rollback(cmd: RollbackCommand) -> WireRequest:
    return WireRequest(UPDATE_HANDLER, [("stream.body", _xml_body(etree.Element("rollback")))])


@register_encoder(AddCommand)
def _encode_add(cmd: AddCommand) -> WireRequest:
    add = etree.Element("add")
    if cmd.parameters.commit_within is not None:
        add.set("commitWithin", str(cmd.parameters.commit_within))
    if cmd.parameters.overwrite is not None:
        add.set("overwrite", format_bool(cmd.parameters.overwrite))
    for document, boost in cmd.documents:
        add.append(cmd.serializer.serialize(document, boost))
    return WireRequest(UPDATE_HANDLER, [("stream.body", _xml_body(add))])


@register_encoder(DeleteCommand)
def _encode_delete(cmd: DeleteCommand) -> WireRequest:
    delete = etree.Element("delete")
    if cmd.parameters.commit_within is not None:
        delete.set("commitWithin", str(cmd.parameters.commit_within))
    for doc_id in cmd.target.ids:
        etree.SubElement(delete, "id").text = doc_id
    query = cmd.target.serialized_query()
    if query is not None:
        etree.SubElement(delete, "query").text = query
    return WireRequest(UPDATE_HANDLER, [("stream.body", _xml_body(delete))])


@register_encoder(ExtractCommand)
def _encode_extract(cmd: ExtractCommand) -> WireRequest:
    p = cmd.parameters
    params = [("literal.id", p.id), ("resource.name", p.resource_name)]
    for name, value in p.fields.items():
        params.append((f"literal.{name}", str(value)))
    _append_flag(params, "commit", p.auto_commit)
    _append_value(params, "capture", p.capture)
    _append_flag(params, "captureAttr", p.capture_attributes)
    _append_value(params, "defaultField", p.default_field)
    _append_flag(params, "extractOnly", p.extract_only)
    if p.extract_format is not None:
        params.append(("extractFormat", p.extract_format.value))
    _append_flag(params, "lowernames", p.lower_names)
    _append_value(params, "uprefix", p.prefix)
    _append_value(params, "stream.type", p.stream_type)
    _append_value(params, "xpath", p.xpath)
    _append_value(params, "stream.body", p.content)
    _append_value(params, "stream.url", p.stream_url)
    _append_value(params, "stream.file", p.stream_file)
    return WireRequest(EXTRACT_HANDLER, params)


@register_encoder(PingCommand)
def _encode_ping(cmd: PingCommand) -> WireRequest:
    return WireRequest(PING_HANDLER, [])
