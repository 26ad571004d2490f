"""
Shared data models for the Solr command layer.

Usage:
    from solrwire.shared.models import ResponseHeader, ExtractResponse

    # Or import specific classes
    from solrwire.shared.models.schema import SolrSchema, SolrField
"""

from .responses import (
    ResponseHeader,
    ExtractField,
    ExtractResponse,
)
from .schema import (
    SolrSchema,
    SolrField,
    SolrFieldType,
    SolrDynamicField,
    SolrCopyField,
)
from .import_status import (
    ImportState,
    ImportStatus,
)

__all__ = [
    # Responses
    "ResponseHeader",
    "ExtractField",
    "ExtractResponse",
    # Schema
    "SolrSchema",
    "SolrField",
    "SolrFieldType",
    "SolrDynamicField",
    "SolrCopyField",
    # Data import
    "ImportState",
    "ImportStatus",
]
