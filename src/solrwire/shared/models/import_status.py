"""
Data import handler status types.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Optional


class ImportState(Enum):
    """State reported by the data import handler."""
    IDLE = "idle"
    BUSY = "busy"
    UNKNOWN = "unknown"

    @classmethod
    def from_wire(cls, value: str) -> 'ImportState':
        """Map the handler's status string onto a state."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass
class ImportStatus:
    """
    Status of the data import handler.

    Counters and timestamps are None when the handler did not report them
    (for example, before the first import has run).

    Attributes:
        status: Whether an import is running.
        command: Command the handler answered (usually "status").
        import_response: Free-form import response text.
        summary: Unnamed status message, e.g. "Indexing completed. ...".
        messages: Every status message exactly as reported.
    """
    status: ImportState
    command: Optional[str] = None
    import_response: Optional[str] = None
    time_elapsed: Optional[str] = None
    total_requests_to_data_source: Optional[int] = None
    total_rows_fetched: Optional[int] = None
    total_documents_processed: Optional[int] = None
    total_documents_skipped: Optional[int] = None
    total_documents_failed: Optional[int] = None
    full_dump_started: Optional[datetime] = None
    delta_dump_started: Optional[datetime] = None
    committed: Optional[datetime] = None
    optimized: Optional[datetime] = None
    time_taken: Optional[str] = None
    summary: Optional[str] = None
    messages: Dict[str, str] = field(default_factory=dict)

    @property
    def is_busy(self) -> bool:
        """Check if an import is currently running."""
        return self.status == ImportState.BUSY
