"""
Schema Parser - JSON form of projection schemas and types.

Key order is fixed so that written schemas are byte-stable:
    - schema: type, schema-id, identifier-field-ids (if any), fields
    - field: id, name, required, type, doc (if set)
    - list: type, element-id, element, element-required
    - map: type, key-id, key, value-id, value, value-required
"""

from __future__ import annotations

from typing import Any, Dict, List, Union

from scan_report import json_util
from scan_report.errors import InvalidScanReportError
from scan_report.schema.types import (
    ListType,
    MapType,
    NestedField,
    Schema,
    StructType,
    Type,
    from_primitive_string,
)

TYPE = "type"
STRUCT = "struct"
LIST = "list"
MAP = "map"
FIELDS = "fields"
ELEMENT = "element"
KEY = "key"
VALUE = "value"
DOC = "doc"
NAME = "name"
ID = "id"
ELEMENT_ID = "element-id"
KEY_ID = "key-id"
VALUE_ID = "value-id"
REQUIRED = "required"
ELEMENT_REQUIRED = "element-required"
VALUE_REQUIRED = "value-required"
SCHEMA_ID = "schema-id"
IDENTIFIER_FIELD_IDS = "identifier-field-ids"


class SchemaParser:
    """Converts schemas and types to and from their JSON form."""

    @staticmethod
    def to_json(schema: Schema, pretty: bool = False) -> str:
        return json_util.generate(SchemaParser.to_json_node(schema), pretty)

    @staticmethod
    def to_json_node(schema: Schema) -> Dict[str, Any]:
        if schema is None:
            raise InvalidScanReportError("Invalid schema: null")

        node: Dict[str, Any] = {TYPE: STRUCT, SCHEMA_ID: schema.schema_id}
        if schema.identifier_field_ids:
            node[IDENTIFIER_FIELD_IDS] = list(schema.identifier_field_ids)
        node[FIELDS] = [_field_to_node(f) for f in schema.fields]
        return node

    @staticmethod
    def type_to_json_node(field_type: Type) -> Any:
        if field_type.is_primitive:
            return str(field_type)
        if isinstance(field_type, StructType):
            return {TYPE: STRUCT, FIELDS: [_field_to_node(f) for f in field_type.fields]}
        if isinstance(field_type, ListType):
            return {
                TYPE: LIST,
                ELEMENT_ID: field_type.element_id,
                ELEMENT: SchemaParser.type_to_json_node(field_type.element_type),
                ELEMENT_REQUIRED: field_type.element_required,
            }
        if isinstance(field_type, MapType):
            return {
                TYPE: MAP,
                KEY_ID: field_type.key_id,
                KEY: SchemaParser.type_to_json_node(field_type.key_type),
                VALUE_ID: field_type.value_id,
                VALUE: SchemaParser.type_to_json_node(field_type.value_type),
                VALUE_REQUIRED: field_type.value_required,
            }
        raise InvalidScanReportError(f"Cannot write unknown type: {field_type}")

    @staticmethod
    def from_json(json: Union[str, bytes, Any]) -> Schema:
        """
        Parse a schema from a JSON string or a decoded JSON value.

        Raises:
            InvalidScanReportError: If the value is not a struct schema
        """
        if isinstance(json, (str, bytes, bytearray)):
            json = json_util.parse(json)
        return SchemaParser.from_json_node(json)

    @staticmethod
    def from_json_node(node: Any) -> Schema:
        """Parse a schema from an already decoded JSON value."""
        parsed = SchemaParser.type_from_json(node)
        if not isinstance(parsed, StructType):
            raise InvalidScanReportError(
                f"Cannot create schema, not a struct type: {parsed}"
            )

        schema_id = json_util.get_int_or_none(SCHEMA_ID, node)
        identifier_field_ids = json_util.get_int_list_or_none(IDENTIFIER_FIELD_IDS, node)
        return Schema.from_struct(
            parsed,
            schema_id=schema_id if schema_id is not None else 0,
            identifier_field_ids=identifier_field_ids or (),
        )

    @staticmethod
    def type_from_json(node: Any) -> Type:
        if isinstance(node, str):
            return from_primitive_string(node)

        if isinstance(node, dict):
            type_name = node.get(TYPE)
            if type_name == STRUCT:
                return _struct_from_json(node)
            if type_name == LIST:
                return _list_from_json(node)
            if type_name == MAP:
                return _map_from_json(node)

        raise InvalidScanReportError(
            f"Cannot parse type from json: {json_util.to_literal(node)}"
        )


def _field_to_node(nested: NestedField) -> Dict[str, Any]:
    node: Dict[str, Any] = {
        ID: nested.field_id,
        NAME: nested.name,
        REQUIRED: nested.is_required,
        TYPE: SchemaParser.type_to_json_node(nested.field_type),
    }
    if nested.doc is not None:
        node[DOC] = nested.doc
    return node


def _struct_from_json(node: Dict[str, Any]) -> StructType:
    field_array = json_util.get(FIELDS, node)
    if not isinstance(field_array, list):
        raise InvalidScanReportError(
            f"Cannot parse struct fields from non-array: {json_util.to_literal(field_array)}",
            field=FIELDS,
        )

    fields: List[NestedField] = []
    for field_node in field_array:
        if not isinstance(field_node, dict):
            raise InvalidScanReportError(
                f"Cannot parse struct field from non-object: {json_util.to_literal(field_node)}"
            )
        fields.append(
            NestedField(
                field_id=json_util.get_int(ID, field_node),
                name=json_util.get_string(NAME, field_node),
                field_type=SchemaParser.type_from_json(json_util.get(TYPE, field_node)),
                is_required=json_util.get_bool(REQUIRED, field_node),
                doc=json_util.get_string_or_none(DOC, field_node),
            )
        )
    return StructType(tuple(fields))


def _list_from_json(node: Dict[str, Any]) -> ListType:
    return ListType(
        element_id=json_util.get_int(ELEMENT_ID, node),
        element_type=SchemaParser.type_from_json(json_util.get(ELEMENT, node)),
        element_required=json_util.get_bool(ELEMENT_REQUIRED, node),
    )


def _map_from_json(node: Dict[str, Any]) -> MapType:
    return MapType(
        key_id=json_util.get_int(KEY_ID, node),
        key_type=SchemaParser.type_from_json(json_util.get(KEY, node)),
        value_id=json_util.get_int(VALUE_ID, node),
        value_type=SchemaParser.type_from_json(json_util.get(VALUE, node)),
        value_required=json_util.get_bool(VALUE_REQUIRED, node),
    )
