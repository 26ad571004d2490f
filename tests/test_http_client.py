"""
Tests for the requests-based HttpConnection.
"""

from unittest.mock import MagicMock, Mock

import pytest
import requests

from solrwire.core.errors import SolrTransportError
from solrwire.core.http_client import HttpConnection


def make_connection(response=None, side_effect=None, timeout=5):
    session = MagicMock(spec=requests.Session)
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = response
    return HttpConnection("http://localhost:8983/solr/core0/", timeout=timeout, session=session), session


def mock_response(status_code=200, text="<response/>"):
    response = Mock()
    response.status_code = status_code
    response.text = text
    return response


@pytest.mark.unit
class TestHttpConnection:
    """Tests for HttpConnection."""

    def test_get_builds_url_and_params(self):
        conn, session = make_connection(mock_response())
        body = conn.get("/update", [("commit", "true")])
        assert body == "<response/>"
        session.get.assert_called_once_with(
            "http://localhost:8983/solr/core0/update",
            params=[("commit", "true"), ("wt", "xml")],
            timeout=5,
        )

    def test_none_params(self):
        conn, session = make_connection(mock_response())
        conn.get("admin/ping", None)
        assert session.get.call_args.kwargs["params"] == [("wt", "xml")]

    def test_explicit_wt_is_kept(self):
        conn, session = make_connection(mock_response())
        conn.get("/select", [("wt", "json")])
        assert session.get.call_args.kwargs["params"] == [("wt", "json")]

    def test_error_status(self):
        conn, _ = make_connection(mock_response(500, "<html>Internal error</html>"))
        with pytest.raises(SolrTransportError) as exc_info:
            conn.get("/update", [])
        assert exc_info.value.status_code == 500
        assert exc_info.value.body == "<html>Internal error</html>"

    def test_timeout(self):
        conn, _ = make_connection(side_effect=requests.exceptions.Timeout("slow"))
        with pytest.raises(SolrTransportError, match="timed out") as exc_info:
            conn.get("/update", [])
        assert exc_info.value.status_code == 408
        assert isinstance(exc_info.value.__cause__, requests.exceptions.Timeout)

    def test_connection_error(self):
        conn, _ = make_connection(side_effect=requests.exceptions.ConnectionError("refused"))
        with pytest.raises(SolrTransportError) as exc_info:
            conn.get("/admin/ping", [])
        assert exc_info.value.status_code == 503

    def test_other_request_error(self):
        conn, _ = make_connection(side_effect=requests.exceptions.InvalidURL("bad"))
        with pytest.raises(SolrTransportError) as exc_info:
            conn.get("/admin/ping", [])
        assert exc_info.value.status_code == 500

    def test_invalid_arguments(self):
        with pytest.raises(ValueError, match="base_url"):
            HttpConnection("")
        with pytest.raises(ValueError, match="timeout"):
            HttpConnection("http://localhost:8983/solr", timeout=0)

    def test_context_manager_closes_session(self):
        conn, session = make_connection(mock_response())
        with conn:
            pass
        session.close.assert_called_once()
