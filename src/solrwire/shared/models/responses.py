"""
Response data types.

This module defines the typed results produced by the response parsers
for status-only operations and for text extraction.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class ResponseHeader:
    """
    Normalized status envelope returned by status-only operations.

    Attributes:
        status: Status code reported by the server (0 means success).
        qtime: Elapsed server time in milliseconds.
        params: Request parameters echoed back by the server, if any.

    Example:
        >>> header = ResponseHeader(status=0, qtime=12)
        >>> header.is_success
        True
    """
    status: int
    qtime: int
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        """Check whether the server reported a zero status."""
        return self.status == 0


@dataclass(frozen=True)
class ExtractField:
    """
    A metadata field returned by the extraction handler.

    Attributes:
        name: Metadata field name (e.g. "Content-Type").
        values: All values reported for the field.
    """
    name: str
    values: List[str] = field(default_factory=list)

    @property
    def value(self) -> str:
        """First value of the field, or an empty string."""
        return self.values[0] if self.values else ""


@dataclass(frozen=True)
class ExtractResponse:
    """
    Result of a text-extraction request.

    Attributes:
        header: Status envelope of the response.
        content: Extracted text; empty when the document had none.
        metadata: Extracted metadata fields in response order.
    """
    header: ResponseHeader
    content: str = ""
    metadata: List[ExtractField] = field(default_factory=list)

    def get_metadata(self, name: str) -> List[str]:
        """Get the values of a metadata field, or an empty list."""
        for item in self.metadata:
            if item.name == name:
                return list(item.values)
        return []
