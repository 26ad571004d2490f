"""
Tests for the basic operations facade (SolrBasicServer).
"""

from unittest.mock import Mock

import pytest
from lxml import etree

from conftest import RecordingConnection, header_xml

from solrwire.commands import (
    AddParameters,
    CommitOptions,
    DeleteParameters,
    ExtractFormat,
    ExtractParameters,
    PingCommand,
)
from solrwire.core.errors import MalformedResponseError, ResponseParseError, SolrTransportError
from solrwire.serializers import DictDocumentSerializer
from solrwire.server import SolrBasicServer
from solrwire.shared.models import ImportState, ResponseHeader


def make_server(connection, **kwargs):
    kwargs.setdefault("query_executor", Mock())
    kwargs.setdefault("document_serializer", DictDocumentSerializer())
    return SolrBasicServer(connection, **kwargs)


def stream_body(params):
    bodies = [v for k, v in params if k == "stream.body"]
    assert len(bodies) == 1
    return etree.fromstring(bodies[0])


@pytest.mark.unit
class TestCommitOptimize:

    def test_commit_none_equals_default_options(self):
        """An absent options argument encodes the same as default options."""
        conn = RecordingConnection()
        server = make_server(conn)
        server.commit(None)
        server.commit(CommitOptions())
        assert conn.requests[0] == conn.requests[1]
        assert conn.requests[0] == ("/update", [("commit", "true")])

    def test_commit_twice_is_identical(self):
        conn = RecordingConnection()
        server = make_server(conn)
        options = CommitOptions(wait_searcher=True, expunge_deletes=False)
        server.commit(options)
        server.commit(options)
        assert len(conn.requests) == 2
        assert conn.requests[0] == conn.requests[1]

    def test_commit_returns_header(self):
        server = make_server(RecordingConnection(header_xml(0, 33)))
        assert server.commit() == ResponseHeader(status=0, qtime=33)

    def test_commit_ignores_max_segments(self):
        conn = RecordingConnection()
        make_server(conn).commit(CommitOptions(max_segments=3))
        assert ("maxSegments", "3") not in conn.last_params

    def test_optimize_sends_max_segments(self):
        conn = RecordingConnection()
        make_server(conn).optimize(CommitOptions(wait_flush=True, max_segments=1))
        assert conn.last_params == [("optimize", "true"), ("waitFlush", "true"), ("maxSegments", "1")]

    def test_invalid_max_segments(self):
        with pytest.raises(ValueError, match="max_segments"):
            CommitOptions(max_segments=0)

    def test_rollback(self):
        conn = RecordingConnection()
        make_server(conn).rollback()
        assert stream_body(conn.last_params).tag == "rollback"


@pytest.mark.unit
class TestAddDelete:
    """Tests for add and delete composition."""

    def test_add_with_boost(self):
        conn = RecordingConnection()
        header = make_server(conn).add_with_boost(
            [({"id": "1"}, 3.0), ({"id": "2"}, None)],
            AddParameters(commit_within=100),
        )
        add = stream_body(conn.last_params)
        assert header.status == 0
        assert add.get("commitWithin") == "100"
        assert [d.get("boost") for d in add] == ["3.0", None]

    def test_add_with_boost_empty(self):
        """An empty sequence still round-trips to a header."""
        conn = RecordingConnection(header_xml(0, 2))
        header = make_server(conn).add_with_boost([])
        add = stream_body(conn.last_params)
        assert add.tag == "add" and len(add) == 0
        assert header == ResponseHeader(status=0, qtime=2)

    def test_add_without_boosts(self):
        conn = RecordingConnection()
        make_server(conn).add(d for d in [{"id": "1"}, {"id": "2"}])
        add = stream_body(conn.last_params)
        assert len(add) == 2
        assert all(d.get("boost") is None for d in add)

    def test_delete_ids_and_query(self):
        conn = RecordingConnection()
        make_server(conn).delete(["a", "b"], "type:old", DeleteParameters(commit_within=10))
        delete = stream_body(conn.last_params)
        assert [e.text for e in delete.findall("id")] == ["a", "b"]
        assert delete.findtext("query") == "type:old"
        assert delete.get("commitWithin") == "10"

    def test_delete_uses_injected_query_serializer(self):
        serializer = Mock()
        serializer.serialize.return_value = "rendered:query"
        conn = RecordingConnection()
        query = object()
        make_server(conn, query_serializer=serializer).delete([], query)
        serializer.serialize.assert_called_once_with(query)
        assert stream_body(conn.last_params).findtext("query") == "rendered:query"

    def test_delete_single_string_sends_nothing(self):
        conn = RecordingConnection()
        with pytest.raises(TypeError):
            make_server(conn).delete("doc42")
        assert conn.requests == []

    def test_delete_nothing_is_no_op_request(self):
        conn = RecordingConnection()
        header = make_server(conn).delete(None)
        assert len(stream_body(conn.last_params)) == 0
        assert header.status == 0


@pytest.mark.unit
class TestPingExtract:

    def test_ping(self):
        conn = RecordingConnection(header_xml(0, 1))
        assert make_server(conn).ping().qtime == 1
        assert conn.requests == [("/admin/ping", [])]

    def test_extract(self, sample_extract_xml):
        conn = RecordingConnection(sample_extract_xml)
        params = ExtractParameters(
            id="r1", resource_name="report.pdf", stream_file="/data/report.pdf",
            extract_only=True, extract_format=ExtractFormat.TEXT,
        )
        result = make_server(conn).extract(params)
        assert conn.last_handler == "/update/extract"
        assert ("extractOnly", "true") in conn.last_params
        assert result.content == "Quarterly results were strong."
        assert result.header.qtime == 8

    def test_extract_empty_content(self):
        body = (
            '<response><lst name="responseHeader"><int name="status">0</int><int name="QTime">1</int></lst>'
            '<str name="blank.txt"></str></response>'
        )
        result = make_server(RecordingConnection(body)).extract(ExtractParameters(id="1", resource_name="blank.txt"))
        assert result.content == ""

    def test_extract_uses_injected_parser(self):
        parser = Mock()
        parser.parse.return_value = "parsed"
        server = make_server(RecordingConnection("<response/>"), extract_response_parser=parser)
        assert server.extract(ExtractParameters(id="1", resource_name="a")) == "parsed"
        assert parser.parse.call_args[0][0].tag == "response"

    def test_extract_requires_parameters(self, connection):
        with pytest.raises(ValueError):
            make_server(connection).extract(None)


@pytest.mark.unit
class TestAdministrativeReads:
    """Schema and import status go straight to the connection."""

    def test_get_schema(self, sample_schema_xml):
        conn = RecordingConnection(sample_schema_xml)
        schema = make_server(conn).get_schema("schema.xml")
        assert conn.requests == [("/admin/file", [("file", "schema.xml")])]
        assert schema.unique_key == "id"

    def test_get_schema_malformed(self):
        with pytest.raises(MalformedResponseError):
            make_server(RecordingConnection("not xml")).get_schema("schema.xml")

    def test_get_schema_wrong_shape(self):
        with pytest.raises(ResponseParseError):
            make_server(RecordingConnection(header_xml())).get_schema("schema.xml")

    def test_get_schema_requires_name(self, connection):
        with pytest.raises(ValueError):
            make_server(connection).get_schema("")

    def test_get_import_status_passes_params(self, sample_import_status_xml):
        conn = RecordingConnection(sample_import_status_xml)
        status = make_server(conn).get_import_status([("command", "status")])
        assert conn.requests == [("/dataimport", [("command", "status")])]
        assert status.status == ImportState.IDLE

    def test_get_import_status_default_params(self, sample_import_status_xml):
        conn = RecordingConnection(sample_import_status_xml)
        make_server(conn).get_import_status()
        assert conn.requests == [("/dataimport", [])]

    def test_injected_schema_parser(self):
        parser = Mock()
        make_server(RecordingConnection("<schema/>"), schema_parser=parser).get_schema("s.xml")
        parser.parse.assert_called_once()

    def test_transport_error_propagates(self):
        error = SolrTransportError(404, "not found")
        with pytest.raises(SolrTransportError) as exc_info:
            make_server(RecordingConnection(error=error)).get_schema("schema.xml")
        assert exc_info.value is error


@pytest.mark.unit
class TestQueriesAndEscapeHatches:

    def test_query_delegates_unchanged(self, connection):
        executor = Mock()
        executor.execute.return_value = ["doc"]
        query, options = object(), object()
        server = make_server(connection, query_executor=executor)
        assert server.query(query, options) == ["doc"]
        executor.execute.assert_called_once_with(query, options)
        assert connection.requests == []

    def test_more_like_this_delegates_unchanged(self, connection):
        executor = Mock()
        query, options = object(), object()
        make_server(connection, query_executor=executor).more_like_this(query, options)
        executor.execute_more_like_this.assert_called_once_with(query, options)

    def test_query_without_executor(self, connection):
        server = make_server(connection, query_executor=None)
        with pytest.raises(RuntimeError, match="No query executor"):
            server.query("*:*")

    def test_send_and_send_and_parse_header(self):
        conn = RecordingConnection(header_xml(0, 4))
        server = make_server(conn)
        assert server.send(PingCommand()) == header_xml(0, 4)
        assert server.send_and_parse_header(PingCommand()).qtime == 4
        assert len(conn.requests) == 2
