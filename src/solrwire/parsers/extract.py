"""
Extracting request handler response parser.

With extractOnly=true the handler answers:

    <response>
      <lst name="responseHeader">...</lst>
      <str name="file.pdf">extracted text</str>
      <lst name="file.pdf_metadata">
        <arr name="Content-Type"><str>application/pdf</str></arr>
      </lst>
    </response>

Without extractOnly only the header is returned; that yields empty content.
"""

import logging
from typing import List, Optional

from lxml import etree

from ..shared.models import ExtractField, ExtractResponse
from .header import HeaderResponseParser
from .protocols import HeaderParserProtocol

logger = logging.getLogger(__name__)

METADATA_SUFFIX = "_metadata"


class ExtractResponseParser:
    """Parses extraction responses into ExtractResponse objects."""

    def __init__(self, header_parser: Optional[HeaderParserProtocol] = None):
        self._header_parser = header_parser or HeaderResponseParser()

    def parse(self, root: etree._Element) -> ExtractResponse:
        header = self._header_parser.parse(root)
        content: Optional[str] = None
        metadata: List[ExtractField] = []
        for child in root:
            if child.tag == "str" and content is None:
                content = child.text or ""
            elif child.tag == "lst" and (child.get("name") or "").endswith(METADATA_SUFFIX):
                metadata.extend(self._parse_metadata(child))
        content = content or ""
        logger.debug(f"Parsed extract response: {len(content)} chars, {len(metadata)} metadata fields")
        return ExtractResponse(header=header, content=content, metadata=metadata)

    @staticmethod
    def _parse_metadata(lst: etree._Element) -> List[ExtractField]:
        fields: List[ExtractField] = []
        for child in lst:
            name = child.get("name")
            if name is None:
                continue
            if child.tag == "arr":
                values = [item.text or "" for item in child]
            else:
                values = [child.text or ""]
            fields.append(ExtractField(name=name, values=values))
        return fields
