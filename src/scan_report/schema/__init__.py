"""
Schema Package - Projection Schemas.

Types describing the columns a scan projected, plus their JSON form.
"""

from scan_report.schema.parser import SchemaParser
from scan_report.schema.types import (
    BinaryType,
    BooleanType,
    DateType,
    DecimalType,
    DoubleType,
    FixedType,
    FloatType,
    IntegerType,
    ListType,
    LongType,
    MapType,
    NestedField,
    PrimitiveType,
    Schema,
    StringType,
    StructType,
    TimestampType,
    TimestampTzType,
    TimeType,
    Type,
    UUIDType,
    from_primitive_string,
    optional,
    required,
)

__all__ = [
    "BinaryType",
    "BooleanType",
    "DateType",
    "DecimalType",
    "DoubleType",
    "FixedType",
    "FloatType",
    "IntegerType",
    "ListType",
    "LongType",
    "MapType",
    "NestedField",
    "PrimitiveType",
    "Schema",
    "SchemaParser",
    "StringType",
    "StructType",
    "TimestampType",
    "TimestampTzType",
    "TimeType",
    "Type",
    "UUIDType",
    "from_primitive_string",
    "optional",
    "required",
]
