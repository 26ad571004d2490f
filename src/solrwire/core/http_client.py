"""
HTTP connection to a Solr server.

This module provides the bundled Connection implementation used by the
command layer, built on a requests session. It maps every transport
failure onto SolrTransportError so callers see one error type for
"the server could not be reached or refused the request".

Classes:
    HttpConnection: GET requests against handler paths under a base URL
"""

import logging
from typing import List, Optional, Tuple

import requests

from ..interfaces import Params
from .errors import SolrTransportError

logger = logging.getLogger(__name__)

BODY_LOG_LIMIT = 500


class HttpConnection:
    """Connection that performs GET requests with requests.

    Handles common request patterns including:
    - Timeout handling
    - Connection error handling
    - Non-2xx status handling
    - Consistent logging format

    Retries and connection pooling policy are left to the session passed in.

    Example:
        >>> connection = HttpConnection("http://localhost:8983/solr/core0")
        >>> body = connection.get("/admin/ping", [])
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the connection.

        Args:
            base_url: Core URL, e.g. http://localhost:8983/solr/core0
            timeout: Request timeout in seconds
            session: Optional requests session to reuse
        """
        if not base_url:
            raise ValueError("base_url cannot be empty")
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def build_url(self, handler: str) -> str:
        """Join the base URL and a handler path."""
        return f"{self.base_url}/{handler.lstrip('/')}"

    def get(self, handler: str, params: Optional[Params]) -> str:
        """Perform a GET request and return the response body.

        Args:
            handler: Handler path such as "/update"
            params: Query-string parameters, or None

        Returns:
            Response body as text

        Raises:
            SolrTransportError: On timeout, connection failure or non-2xx status
        """
        url = self.build_url(handler)
        query: List[Tuple[str, str]] = list(params or [])
        if not any(key == "wt" for key, _ in query):
            query.append(("wt", "xml"))

        try:
            logger.debug(f"GET {url} ({len(query)} params)")
            response = self._session.get(url, params=query, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.error(f"GET {handler}: Request timeout after {self.timeout}s")
            raise SolrTransportError(
                status_code=408,
                message=f"GET {handler} timed out after {self.timeout} seconds",
            ) from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"GET {handler}: Connection error: {e}")
            raise SolrTransportError(
                status_code=503,
                message=f"GET {handler} failed to connect to {self.base_url}: {e}",
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"GET {handler}: Request error: {e}")
            raise SolrTransportError(
                status_code=500,
                message=f"GET {handler} request failed: {e}",
            ) from e

        if not 200 <= response.status_code < 300:
            logger.error(f"GET {handler}: HTTP {response.status_code}")
            logger.debug(f"Response text: {response.text[:BODY_LOG_LIMIT]}")
            raise SolrTransportError(
                status_code=response.status_code,
                message=f"GET {handler} returned an error status",
                body=response.text,
            )
        return response.text

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> 'HttpConnection':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
