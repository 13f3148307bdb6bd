"""
Table types and the projection Schema.

Types are immutable values compared structurally. Primitive types render
as their wire name (``string``, ``decimal(9, 2)``, ``fixed[16]``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from scan_report.errors import InvalidScanReportError

_FIXED = re.compile(r"fixed\[\s*(\d+)\s*\]")
_DECIMAL = re.compile(r"decimal\(\s*(\d+)\s*,\s*(\d+)\s*\)")


class Type:
    """Base class of all types."""

    @property
    def is_primitive(self) -> bool:
        return False

    @property
    def is_struct(self) -> bool:
        return False


@dataclass(frozen=True)
class PrimitiveType(Type):
    name: str

    @property
    def is_primitive(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FixedType(Type):
    length: int

    @property
    def is_primitive(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"fixed[{self.length}]"


@dataclass(frozen=True)
class DecimalType(Type):
    precision: int
    scale: int

    @property
    def is_primitive(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"decimal({self.precision}, {self.scale})"


BooleanType = PrimitiveType("boolean")
IntegerType = PrimitiveType("int")
LongType = PrimitiveType("long")
FloatType = PrimitiveType("float")
DoubleType = PrimitiveType("double")
DateType = PrimitiveType("date")
TimeType = PrimitiveType("time")
TimestampType = PrimitiveType("timestamp")
TimestampTzType = PrimitiveType("timestamptz")
StringType = PrimitiveType("string")
UUIDType = PrimitiveType("uuid")
BinaryType = PrimitiveType("binary")

PRIMITIVE_TYPES: Dict[str, PrimitiveType] = {
    t.name: t
    for t in (
        BooleanType,
        IntegerType,
        LongType,
        FloatType,
        DoubleType,
        DateType,
        TimeType,
        TimestampType,
        TimestampTzType,
        StringType,
        UUIDType,
        BinaryType,
    )
}


def from_primitive_string(type_string: str) -> Type:
    """
    Parse a primitive type from its wire name.

    Raises:
        InvalidScanReportError: If the string names no primitive type
    """
    lower = type_string.lower()
    if lower in PRIMITIVE_TYPES:
        return PRIMITIVE_TYPES[lower]

    fixed = _FIXED.fullmatch(lower)
    if fixed:
        return FixedType(int(fixed.group(1)))

    decimal = _DECIMAL.fullmatch(lower)
    if decimal:
        return DecimalType(int(decimal.group(1)), int(decimal.group(2)))

    raise InvalidScanReportError(f"Cannot parse type string to primitive: {type_string}")


@dataclass(frozen=True)
class NestedField:
    """A named, numbered field of a struct."""

    field_id: int
    name: str
    field_type: Type
    is_required: bool = False
    doc: Optional[str] = None

    def __str__(self) -> str:
        qualifier = "required" if self.is_required else "optional"
        doc = f" ({self.doc})" if self.doc is not None else ""
        return f"{self.field_id}: {self.name}: {qualifier} {self.field_type}{doc}"


def required(
    field_id: int, name: str, field_type: Type, doc: Optional[str] = None
) -> NestedField:
    return NestedField(field_id, name, field_type, True, doc)


def optional(
    field_id: int, name: str, field_type: Type, doc: Optional[str] = None
) -> NestedField:
    return NestedField(field_id, name, field_type, False, doc)


@dataclass(frozen=True)
class StructType(Type):
    fields: Tuple[NestedField, ...] = ()

    @property
    def is_struct(self) -> bool:
        return True

    def field(self, name: str) -> Optional[NestedField]:
        for nested in self.fields:
            if nested.name == name:
                return nested
        return None

    def __str__(self) -> str:
        return f"struct<{', '.join(str(f) for f in self.fields)}>"


@dataclass(frozen=True)
class ListType(Type):
    element_id: int
    element_type: Type
    element_required: bool = False

    def __str__(self) -> str:
        return f"list<{self.element_type}>"


@dataclass(frozen=True)
class MapType(Type):
    key_id: int
    key_type: Type
    value_id: int
    value_type: Type
    value_required: bool = False

    def __str__(self) -> str:
        return f"map<{self.key_type}, {self.value_type}>"


class Schema:
    """
    Ordered set of top-level fields, plus its schema id.

    Example:
        >>> Schema(required(1, "c1", StringType, "c1"))
    """

    def __init__(
        self,
        *fields: NestedField,
        schema_id: int = 0,
        identifier_field_ids: Iterable[int] = (),
    ) -> None:
        self._struct = StructType(tuple(fields))
        self._schema_id = schema_id
        self._identifier_field_ids = tuple(identifier_field_ids)

    @classmethod
    def from_struct(
        cls,
        struct: StructType,
        schema_id: int = 0,
        identifier_field_ids: Iterable[int] = (),
    ) -> "Schema":
        return cls(
            *struct.fields,
            schema_id=schema_id,
            identifier_field_ids=identifier_field_ids,
        )

    @property
    def schema_id(self) -> int:
        return self._schema_id

    @property
    def identifier_field_ids(self) -> Tuple[int, ...]:
        return self._identifier_field_ids

    @property
    def fields(self) -> Tuple[NestedField, ...]:
        return self._struct.fields

    @property
    def column_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def as_struct(self) -> StructType:
        return self._struct

    def find_field(self, name: str) -> Optional[NestedField]:
        return self._struct.field(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return (
            self._struct == other._struct
            and self._schema_id == other._schema_id
            and self._identifier_field_ids == other._identifier_field_ids
        )

    def __hash__(self) -> int:
        return hash((self._struct, self._schema_id, self._identifier_field_ids))

    def __repr__(self) -> str:
        return f"Schema(schema_id={self._schema_id}, {self._struct})"
