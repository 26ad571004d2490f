"""
Response header parser.

Status-only responses share one envelope:

    <response>
      <lst name="responseHeader">
        <int name="status">0</int>
        <int name="QTime">12</int>
        <lst name="params">...</lst>
      </lst>
    </response>
"""

import logging
from typing import Dict

from lxml import etree

from ..core.errors import ResponseParseError
from ..shared.models import ResponseHeader
from .xml import find_named, required_int

logger = logging.getLogger(__name__)

HEADER_NAME = "responseHeader"


class HeaderResponseParser:
    """
    Parses the responseHeader envelope.

    Missing or non-numeric status and QTime fields raise ResponseParseError
    naming the field; they are never defaulted to zero.

    Example:
        >>> parser = HeaderResponseParser()
        >>> header = parser.parse(parse_xml(body))
        >>> header.qtime
        12
    """

    def parse(self, root: etree._Element) -> ResponseHeader:
        header = self.find_header(root)
        status = required_int(header, "status")
        qtime = required_int(header, "QTime")
        params = self._parse_params(header)
        logger.debug(f"Parsed response header: status={status} QTime={qtime}")
        return ResponseHeader(status=status, qtime=qtime, params=params)

    @staticmethod
    def find_header(root: etree._Element) -> etree._Element:
        """Locate the responseHeader element.

        Accepts the envelope as the document root or as a direct child of it.

        Raises:
            ResponseParseError: If no responseHeader element is present
        """
        if root.tag == "lst" and root.get("name") == HEADER_NAME:
            return root
        header = find_named(root, "lst", HEADER_NAME)
        if header is None:
            raise ResponseParseError(
                HEADER_NAME,
                f"Expected <lst name=\"{HEADER_NAME}\"> under <{root.tag}>",
            )
        return header

    @staticmethod
    def _parse_params(header: etree._Element) -> Dict[str, str]:
        params_el = find_named(header, "lst", "params")
        if params_el is None:
            return {}
        params: Dict[str, str] = {}
        for child in params_el:
            name = child.get("name")
            if name is None:
                continue
            if child.tag == "arr":
                # Multi-valued parameter; keep the values comma-joined
                params[name] = ",".join((item.text or "") for item in child)
            else:
                params[name] = child.text or ""
        return params
