"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Tests exercising several components together
"""

import os
import sys
from typing import List, Optional, Sequence, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Tests exercising several components together")


def header_xml(status: int = 0, qtime: int = 12) -> str:
    """Build a minimal status envelope."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<response>'
        '<lst name="responseHeader">'
        f'<int name="status">{status}</int>'
        f'<int name="QTime">{qtime}</int>'
        '</lst>'
        '</response>'
    )


class RecordingConnection:
    """Connection stub that records every request and returns canned bodies.

    Bodies are returned in order; the last one repeats once the list is
    exhausted.
    """

    def __init__(self, *bodies: str, error: Optional[Exception] = None):
        self.bodies = list(bodies) or [header_xml()]
        self.error = error
        self.requests: List[Tuple[str, Optional[List[Tuple[str, str]]]]] = []

    def get(self, handler: str, params: Optional[Sequence[Tuple[str, str]]]) -> str:
        self.requests.append((handler, list(params) if params is not None else None))
        if self.error is not None:
            raise self.error
        if len(self.bodies) > 1:
            return self.bodies.pop(0)
        return self.bodies[0]

    @property
    def last_handler(self) -> str:
        return self.requests[-1][0]

    @property
    def last_params(self) -> List[Tuple[str, str]]:
        return self.requests[-1][1]


class EchoConnection:
    """Connection stub that echoes the request back as a params list."""

    def get(self, handler: str, params: Optional[Sequence[Tuple[str, str]]]) -> str:
        return repr((handler, list(params or [])))


@pytest.fixture
def connection():
    """Recording connection answering with a successful header."""
    return RecordingConnection()


@pytest.fixture
def sample_extract_xml():
    """Extraction response with content and metadata."""
    return '''<?xml version="1.0" encoding="UTF-8"?>
<response>
  <lst name="responseHeader"><int name="status">0</int><int name="QTime">8</int></lst>
  <str name="report.pdf">Quarterly results were strong.</str>
  <lst name="report.pdf_metadata">
    <arr name="Content-Type"><str>application/pdf</str></arr>
    <arr name="Author"><str>Jane Smith</str><str>John Doe</str></arr>
    <str name="stream_size">1024</str>
  </lst>
</response>'''


@pytest.fixture
def sample_schema_xml():
    """Classic schema.xml layout with types and fields wrappers."""
    return '''<?xml version="1.0" encoding="UTF-8" ?>
<schema name="example" version="1.5">
  <types>
    <fieldType name="string" class="solr.StrField" sortMissingLast="true"/>
    <fieldType name="int" class="solr.TrieIntField" precisionStep="0"/>
    <fieldtype name="text" class="solr.TextField"/>
  </types>
  <fields>
    <field name="id" type="string" indexed="true" stored="true" required="true"/>
    <field name="title" type="text" multiValued="true"/>
    <field name="popularity" type="int" stored="false" docValues="true"/>
    <dynamicField name="*_s" type="string"/>
  </fields>
  <uniqueKey>id</uniqueKey>
  <defaultSearchField>title</defaultSearchField>
  <solrQueryParser defaultOperator="OR"/>
  <copyField source="title" dest="text_all"/>
</schema>'''


@pytest.fixture
def sample_import_status_xml():
    """Data import handler status after a completed full import."""
    return '''<?xml version="1.0" encoding="UTF-8"?>
<response>
  <lst name="responseHeader"><int name="status">0</int><int name="QTime">0</int></lst>
  <lst name="initArgs"><lst name="defaults"><str name="config">data-config.xml</str></lst></lst>
  <str name="command">status</str>
  <str name="status">idle</str>
  <str name="importResponse"/>
  <lst name="statusMessages">
    <str name="Total Requests made to DataSource">1</str>
    <str name="Total Rows Fetched">10</str>
    <str name="Total Documents Skipped">0</str>
    <str name="Full Dump Started">2010-06-07 13:47:12</str>
    <str name="">Indexing completed. Added/Updated: 10 documents. Deleted 0 documents.</str>
    <str name="Committed">2010-06-07 13:47:13</str>
    <str name="Optimized">2010-06-07 13:47:13</str>
    <str name="Total Documents Processed">10</str>
    <str name="Time taken ">0:0:1.150</str>
  </lst>
  <str name="WARNING">This response format is experimental.  It is likely to change in the future.</str>
</response>'''
