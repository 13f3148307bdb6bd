"""
JSON helpers shared by the parsers.

Typed getters produce the error messages consumers of the wire format
depend on, e.g. ``Cannot parse missing string: table-name`` or
``Cannot parse to a long value: snapshot-id: "invalid"``.

The writer reproduces the layout of Jackson's default pretty printer
(``"key" : value``, two-space indentation per object level, inline
arrays, ``{ }`` for empty objects) so that reports are byte-identical to
those produced by other implementations.
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Optional, Union

from scan_report.errors import InvalidScanReportError

JsonNode = Any

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse(text: Union[str, bytes, bytearray]) -> JsonNode:
    """Decode a JSON document."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        if isinstance(text, (bytes, bytearray)):
            text = text.decode("utf-8", errors="replace")
        raise InvalidScanReportError(f"Failed to parse JSON string: {text}") from exc


def to_literal(node: JsonNode) -> str:
    """Compact JSON rendering of a value, used in error messages."""
    return json.dumps(node, separators=(",", ":"), ensure_ascii=False)


def is_integral(node: JsonNode) -> bool:
    return isinstance(node, int) and not isinstance(node, bool)


def get(key: str, node: Dict[str, JsonNode]) -> JsonNode:
    if key not in node:
        raise InvalidScanReportError(f"Cannot parse missing field: {key}", field=key)
    return node[key]


def get_string(key: str, node: Dict[str, JsonNode]) -> str:
    if key not in node:
        raise InvalidScanReportError(f"Cannot parse missing string: {key}", field=key)
    value = node[key]
    if not isinstance(value, str):
        raise InvalidScanReportError(
            f"Cannot parse to a string value: {key}: {to_literal(value)}", field=key
        )
    return value


def get_string_or_none(key: str, node: Dict[str, JsonNode]) -> Optional[str]:
    if node.get(key) is None:
        return None
    return get_string(key, node)


def get_long(key: str, node: Dict[str, JsonNode]) -> int:
    if key not in node:
        raise InvalidScanReportError(f"Cannot parse missing long: {key}", field=key)
    value = node[key]
    if not is_integral(value) or not LONG_MIN <= value <= LONG_MAX:
        raise InvalidScanReportError(
            f"Cannot parse to a long value: {key}: {to_literal(value)}", field=key
        )
    return value


def get_int(key: str, node: Dict[str, JsonNode]) -> int:
    if key not in node:
        raise InvalidScanReportError(f"Cannot parse missing int: {key}", field=key)
    value = node[key]
    if not is_integral(value) or not INT_MIN <= value <= INT_MAX:
        raise InvalidScanReportError(
            f"Cannot parse to an integer value: {key}: {to_literal(value)}", field=key
        )
    return value


def get_int_or_none(key: str, node: Dict[str, JsonNode]) -> Optional[int]:
    if node.get(key) is None:
        return None
    return get_int(key, node)


def get_bool(key: str, node: Dict[str, JsonNode]) -> bool:
    if key not in node:
        raise InvalidScanReportError(f"Cannot parse missing boolean: {key}", field=key)
    value = node[key]
    if not isinstance(value, bool):
        raise InvalidScanReportError(
            f"Cannot parse to a boolean value: {key}: {to_literal(value)}", field=key
        )
    return value


def get_int_list_or_none(key: str, node: Dict[str, JsonNode]) -> Optional[List[int]]:
    value = node.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise InvalidScanReportError(
            f"Cannot parse {key} from non-array: {to_literal(value)}", field=key
        )
    for element in value:
        if not is_integral(element) or not INT_MIN <= element <= INT_MAX:
            raise InvalidScanReportError(
                f"Cannot parse integer from non-int value in {key}: {to_literal(element)}",
                field=key,
            )
    return list(value)


# =============================================================================
# Writer
# =============================================================================


def generate(node: JsonNode, pretty: bool = False) -> str:
    """
    Encode a JSON value.

    Args:
        node: dicts (in insertion order), lists, str, int, float, bool, None
        pretty: Use the pretty layout instead of compact output

    Returns:
        The encoded document, without a trailing newline
    """
    out: List[str] = []
    _write(node, out, pretty, 0)
    return "".join(out)


def _write(node: JsonNode, out: List[str], pretty: bool, nesting: int) -> None:
    if isinstance(node, dict):
        _write_object(node, out, pretty, nesting)
    elif isinstance(node, (list, tuple)):
        _write_array(node, out, pretty, nesting)
    else:
        out.append(_scalar(node))


def _write_object(
    node: Dict[str, JsonNode], out: List[str], pretty: bool, nesting: int
) -> None:
    if not node:
        out.append("{ }" if pretty else "{}")
        return

    out.append("{")
    for index, (key, value) in enumerate(node.items()):
        if index:
            out.append(",")
        if pretty:
            out.append("\n" + "  " * (nesting + 1))
        out.append(_scalar(str(key)))
        out.append(" : " if pretty else ":")
        _write(value, out, pretty, nesting + 1)
    if pretty:
        out.append("\n" + "  " * nesting)
    out.append("}")


def _write_array(node: Any, out: List[str], pretty: bool, nesting: int) -> None:
    # arrays stay on one line and do not add an indentation level
    if not node:
        out.append("[ ]" if pretty else "[]")
        return

    out.append("[ " if pretty else "[")
    for index, value in enumerate(node):
        if index:
            out.append(", " if pretty else ",")
        _write(value, out, pretty, nesting)
    out.append(" ]" if pretty else "]")


def _scalar(value: Any) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidScanReportError(f"Cannot write non-finite number: {value}")
    if value is None or isinstance(value, (bool, int, float, str)):
        return json.dumps(value, ensure_ascii=False)
    raise TypeError(f"Cannot write JSON value of type {type(value).__name__}")
