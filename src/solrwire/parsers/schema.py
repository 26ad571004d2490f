"""
Solr schema.xml parser.

Reads field types, fields, dynamic fields, copy fields and the legacy
top-level settings from a schema file fetched through the admin file
handler. Both the classic layout (<types>/<fields> wrappers, lowercase
<fieldtype>) and the flat layout of newer schemas are accepted.
"""

import logging
from typing import Dict, Iterator, Optional

from lxml import etree

from ..core.errors import ResponseParseError
from ..shared.models import (
    SolrCopyField,
    SolrDynamicField,
    SolrField,
    SolrFieldType,
    SolrSchema,
)

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def _parse_bool(element: etree._Element, attribute: str, default: bool) -> bool:
    raw = element.get(attribute)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ResponseParseError(
        attribute,
        f"Invalid boolean {raw!r} for attribute '{attribute}' on <{element.tag} name=\"{element.get('name')}\">",
    )


def _iter_declarations(root: etree._Element, wrapper: str, *tags: str) -> Iterator[etree._Element]:
    """Yield declarations either directly under <schema> or inside a wrapper."""
    for child in root:
        if child.tag in tags:
            yield child
        elif child.tag == wrapper:
            for item in child:
                if item.tag in tags:
                    yield item


def _child_text(root: etree._Element, tag: str) -> Optional[str]:
    child = root.find(tag)
    if child is None or child.text is None:
        return None
    return child.text.strip() or None


class SchemaParser:
    """
    Parses a Solr schema document into a SolrSchema.

    Raises ResponseParseError when the root is not <schema>, when a
    declaration lacks its name, or when a field references an undeclared type.

    Example:
        >>> schema = SchemaParser().parse(parse_xml(schema_xml))
        >>> schema.unique_key
        'id'
    """

    def parse(self, root: etree._Element) -> SolrSchema:
        if root.tag != "schema":
            raise ResponseParseError("schema", f"Expected <schema> root element, got <{root.tag}>")

        schema = SolrSchema(name=root.get("name", ""), version=root.get("version"))

        types_by_name: Dict[str, SolrFieldType] = {}
        for el in _iter_declarations(root, "types", "fieldType", "fieldtype"):
            field_type = SolrFieldType(
                name=self._required_attr(el, "name"),
                class_name=self._required_attr(el, "class"),
            )
            types_by_name[field_type.name] = field_type
            schema.field_types.append(field_type)

        for el in _iter_declarations(root, "fields", "field"):
            name = self._required_attr(el, "name")
            schema.fields.append(SolrField(
                name=name,
                field_type=self._resolve_type(types_by_name, el, name),
                is_required=_parse_bool(el, "required", False),
                is_multi_valued=_parse_bool(el, "multiValued", False),
                is_stored=_parse_bool(el, "stored", True),
                is_indexed=_parse_bool(el, "indexed", True),
                is_doc_values=_parse_bool(el, "docValues", False),
            ))

        for el in _iter_declarations(root, "fields", "dynamicField"):
            name = self._required_attr(el, "name")
            type_name = el.get("type")
            schema.dynamic_fields.append(SolrDynamicField(
                name=name,
                field_type=self._resolve_type(types_by_name, el, name) if type_name else None,
            ))

        for el in root.iter("copyField"):
            schema.copy_fields.append(SolrCopyField(
                source=self._required_attr(el, "source"),
                destination=self._required_attr(el, "dest"),
            ))

        schema.unique_key = _child_text(root, "uniqueKey")
        schema.default_search_field = _child_text(root, "defaultSearchField")
        query_parser = root.find("solrQueryParser")
        if query_parser is not None:
            schema.default_operator = query_parser.get("defaultOperator")

        logger.debug(
            f"Parsed schema '{schema.name}': {len(schema.field_types)} types, "
            f"{len(schema.fields)} fields, {len(schema.dynamic_fields)} dynamic fields"
        )
        return schema

    @staticmethod
    def _required_attr(element: etree._Element, attribute: str) -> str:
        value = element.get(attribute)
        if not value:
            raise ResponseParseError(attribute, f"<{element.tag}> is missing the '{attribute}' attribute")
        return value

    @staticmethod
    def _resolve_type(
        types_by_name: Dict[str, SolrFieldType],
        element: etree._Element,
        field_name: str,
    ) -> SolrFieldType:
        type_name = element.get("type")
        if not type_name:
            raise ResponseParseError("type", f"Field '{field_name}' has no type attribute")
        try:
            return types_by_name[type_name]
        except KeyError:
            raise ResponseParseError(
                "type", f"Field '{field_name}' references undeclared type '{type_name}'"
            ) from None
