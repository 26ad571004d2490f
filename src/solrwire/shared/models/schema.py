"""
Schema data types.

Typed view of a Solr schema.xml file as returned by the admin file handler.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class SolrFieldType:
    """
    A <fieldType> declaration.

    Attributes:
        name: Type name referenced by fields (e.g. "string").
        class_name: Implementing class (e.g. "solr.StrField").
    """
    name: str
    class_name: str


@dataclass(frozen=True)
class SolrField:
    """
    A <field> declaration.

    Flags follow Solr defaults: stored and indexed default to True,
    the others to False.
    """
    name: str
    field_type: SolrFieldType
    is_required: bool = False
    is_multi_valued: bool = False
    is_stored: bool = True
    is_indexed: bool = True
    is_doc_values: bool = False


@dataclass(frozen=True)
class SolrDynamicField:
    """A <dynamicField> declaration such as "*_s"."""
    name: str
    field_type: Optional[SolrFieldType] = None


@dataclass(frozen=True)
class SolrCopyField:
    """A <copyField> declaration."""
    source: str
    destination: str


@dataclass
class SolrSchema:
    """
    Parsed Solr schema.

    Attributes:
        name: Schema name attribute.
        version: Schema version attribute, if declared.
        field_types: Declared field types.
        fields: Declared fields.
        dynamic_fields: Declared dynamic fields.
        copy_fields: Declared copy fields.
        unique_key: Name of the unique key field, if declared.
        default_search_field: Legacy default search field, if declared.
        default_operator: Legacy default query operator, if declared.

    Example:
        >>> schema.find_field_by_name("id").field_type.class_name
        'solr.StrField'
    """
    name: str = ""
    version: Optional[str] = None
    field_types: List[SolrFieldType] = field(default_factory=list)
    fields: List[SolrField] = field(default_factory=list)
    dynamic_fields: List[SolrDynamicField] = field(default_factory=list)
    copy_fields: List[SolrCopyField] = field(default_factory=list)
    unique_key: Optional[str] = None
    default_search_field: Optional[str] = None
    default_operator: Optional[str] = None

    def find_field_by_name(self, name: str) -> Optional[SolrField]:
        """Find a declared field by name."""
        for item in self.fields:
            if item.name == name:
                return item
        return None

    def find_field_type_by_name(self, name: str) -> Optional[SolrFieldType]:
        """Find a declared field type by name."""
        for item in self.field_types:
            if item.name == name:
                return item
        return None
