"""
solrwire: command dispatch and response parsing for Solr.

Translates high-level operations (commit, optimize, rollback, add,
delete, extract, ping, schema and data import status) into wire requests
against a Solr server and parses the XML responses into typed results.

Usage:
    from solrwire import HttpConnection, SolrBasicServer, DictDocumentSerializer

    server = SolrBasicServer(
        HttpConnection("http://localhost:8983/solr/core0"),
        query_executor=None,
        document_serializer=DictDocumentSerializer(),
    )
    server.add_with_boost([({"id": "1"}, 2.0), ({"id": "2"}, None)])
    server.commit()
"""

from .core import (
    HttpConnection,
    MalformedResponseError,
    ResponseParseError,
    SolrError,
    SolrResponseError,
    SolrTransportError,
    UnsupportedCommandError,
)
from .commands import (
    AddParameters,
    CommitOptions,
    DeleteParameters,
    ExtractFormat,
    ExtractParameters,
)
from .config import SolrConfig
from .serializers import DictDocumentSerializer, PassThroughQuerySerializer
from .server import LowLevelSolr, SolrBasicServer
from .shared.models import (
    ExtractField,
    ExtractResponse,
    ImportState,
    ImportStatus,
    ResponseHeader,
    SolrSchema,
)

__version__ = "0.1.0"

__all__ = [
    # Server
    "LowLevelSolr",
    "SolrBasicServer",
    "HttpConnection",
    "SolrConfig",
    # Serializers
    "DictDocumentSerializer",
    "PassThroughQuerySerializer",
    # Options
    "AddParameters",
    "CommitOptions",
    "DeleteParameters",
    "ExtractFormat",
    "ExtractParameters",
    # Results
    "ExtractField",
    "ExtractResponse",
    "ImportState",
    "ImportStatus",
    "ResponseHeader",
    "SolrSchema",
    # Errors
    "SolrError",
    "SolrTransportError",
    "UnsupportedCommandError",
    "SolrResponseError",
    "MalformedResponseError",
    "ResponseParseError",
]
