"""
Option objects for update and extraction commands.

Every option object is immutable and fully defaulted, so an absent
argument can always be replaced by a freshly constructed instance:

    options = options or CommitOptions()
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from ..interfaces import QuerySerializer


@dataclass(frozen=True)
class CommitOptions:
    """Options shared by commit and optimize.

    Attributes:
        wait_flush: Block until index changes are flushed to disk
        wait_searcher: Block until a new searcher is opened
        expunge_deletes: Merge segments with deletes away
        max_segments: Optimize down to at most this many segments (optimize only)
    """
    wait_flush: Optional[bool] = None
    wait_searcher: Optional[bool] = None
    expunge_deletes: Optional[bool] = None
    max_segments: Optional[int] = None

    def __post_init__(self):
        """Validate configuration values."""
        if self.max_segments is not None and self.max_segments < 1:
            raise ValueError("max_segments must be >= 1")


@dataclass(frozen=True)
class AddParameters:
    """Options for add requests.

    Attributes:
        commit_within: Commit within this many milliseconds
        overwrite: Replace documents with the same unique key
    """
    commit_within: Optional[int] = None
    overwrite: Optional[bool] = None

    def __post_init__(self):
        if self.commit_within is not None and self.commit_within < 0:
            raise ValueError("commit_within must be >= 0")


@dataclass(frozen=True)
class DeleteParameters:
    """Options for delete requests."""
    commit_within: Optional[int] = None

    def __post_init__(self):
        if self.commit_within is not None and self.commit_within < 0:
            raise ValueError("commit_within must be >= 0")


def _reject_single_id(ids: Any) -> None:
    # A bare string is iterable and would be split into one id per character
    if isinstance(ids, (str, bytes)):
        raise TypeError(f"ids must be an iterable of ids, not a single {type(ids).__name__}: {ids!r}")


@dataclass(frozen=True)
class DeleteByIdAndOrQuery:
    """
    What a delete request removes: documents by id, by query, or both.

    An empty id list together with no query is a valid no-op request.

    Attributes:
        ids: Unique keys of documents to delete.
        query: Query object selecting documents to delete, or None.
        query_serializer: Renders the query as a query string.
    """
    ids: Tuple[str, ...] = ()
    query: Any = None
    query_serializer: Optional[QuerySerializer] = None

    def __post_init__(self):
        _reject_single_id(self.ids)
        # Accept any iterable of ids; store an immutable copy
        object.__setattr__(self, 'ids', tuple(str(i) for i in (self.ids or ())))
        if self.query is not None and self.query_serializer is None:
            raise ValueError("query_serializer is required when a query is given")

    def serialized_query(self) -> Optional[str]:
        """Render the query, or None when deleting by id only."""
        if self.query is None:
            return None
        return self.query_serializer.serialize(self.query)

    @classmethod
    def create(
        cls,
        ids: Optional[Iterable[str]],
        query: Any = None,
        query_serializer: Optional[QuerySerializer] = None,
    ) -> 'DeleteByIdAndOrQuery':
        """Build from an optional id iterable."""
        _reject_single_id(ids)
        return cls(ids=tuple(ids or ()), query=query, query_serializer=query_serializer)


class ExtractFormat(Enum):
    """Output format of extracted content."""
    XML = "xml"
    TEXT = "text"


@dataclass(frozen=True)
class ExtractParameters:
    """
    Parameters for the extracting request handler.

    The content source is one of `content` (sent inline), `stream_url`
    or `stream_file` (fetched by the server).

    Attributes:
        id: Unique key assigned to the extracted document (literal.id)
        resource_name: File name hint for content-type detection
        content: Inline text content to extract from
        stream_url: URL the server should fetch the content from
        stream_file: Server-side file path to extract from
        stream_type: Explicit content type of the stream
        auto_commit: Commit after indexing the extracted document
        capture: XHTML element name to capture into its own field
        capture_attributes: Index XHTML attributes into separate fields
        default_field: Field for content not mapped elsewhere
        extract_only: Return the extracted content instead of indexing it
        extract_format: Format of the content returned with extract_only
        fields: Extra literal field values to index with the document
        lower_names: Lowercase extracted field names
        prefix: Prefix for extracted fields unknown to the schema
        xpath: XPath expression restricting the extracted content
    """
    id: str
    resource_name: str
    content: Optional[str] = None
    stream_url: Optional[str] = None
    stream_file: Optional[str] = None
    stream_type: Optional[str] = None
    auto_commit: Optional[bool] = None
    capture: Optional[str] = None
    capture_attributes: Optional[bool] = None
    default_field: Optional[str] = None
    extract_only: Optional[bool] = None
    extract_format: Optional[ExtractFormat] = None
    fields: Dict[str, str] = field(default_factory=dict)
    lower_names: Optional[bool] = None
    prefix: Optional[str] = None
    xpath: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("id cannot be empty")
        if not self.resource_name:
            raise ValueError("resource_name cannot be empty")
        sources = [s for s in (self.content, self.stream_url, self.stream_file) if s is not None]
        if len(sources) > 1:
            raise ValueError("Only one of content, stream_url or stream_file may be set")
