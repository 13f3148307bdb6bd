"""
Expression Parser - JSON form of filter expressions.

Wire form:
    - ``true`` / ``false``
    - ``{"type": "and" | "or", "left": ..., "right": ...}``
    - ``{"type": "not", "child": ...}``
    - ``{"type": "is-null", "term": "col"}``
    - ``{"type": "lt", "term": "col", "value": 5}``
    - ``{"type": "in", "term": "col", "values": [1, 2]}``
"""

from __future__ import annotations

from typing import Any, Dict, Union

from scan_report import json_util
from scan_report.errors import InvalidScanReportError
from scan_report.expressions.expressions import (
    FALSE,
    LITERAL_OPERATIONS,
    SET_OPERATIONS,
    TRUE,
    UNARY_OPERATIONS,
    And,
    Expression,
    Not,
    Operation,
    Or,
    UnboundPredicate,
)

TYPE = "type"
LEFT = "left"
RIGHT = "right"
CHILD = "child"
TERM = "term"
VALUE = "value"
VALUES = "values"

_SCALAR_TYPES = (str, int, float, bool)


class ExpressionParser:
    """Converts expressions to and from their JSON form."""

    @staticmethod
    def to_json(expression: Expression, pretty: bool = False) -> str:
        return json_util.generate(ExpressionParser.to_json_node(expression), pretty)

    @staticmethod
    def to_json_node(expression: Expression) -> Any:
        if expression is None:
            raise InvalidScanReportError("Invalid expression: null")

        op = expression.op
        if op is Operation.TRUE:
            return True
        if op is Operation.FALSE:
            return False
        if isinstance(expression, (And, Or)):
            return {
                TYPE: op.value,
                LEFT: ExpressionParser.to_json_node(expression.left),
                RIGHT: ExpressionParser.to_json_node(expression.right),
            }
        if isinstance(expression, Not):
            return {TYPE: op.value, CHILD: ExpressionParser.to_json_node(expression.child)}
        if isinstance(expression, UnboundPredicate):
            node: Dict[str, Any] = {TYPE: op.value, TERM: expression.term}
            if op in LITERAL_OPERATIONS:
                node[VALUE] = expression.value
            elif op in SET_OPERATIONS:
                node[VALUES] = list(expression.values)
            return node

        raise InvalidScanReportError(f"Cannot write unsupported expression: {expression}")

    @staticmethod
    def from_json(json: Union[str, bytes, Any]) -> Expression:
        """
        Parse an expression from a JSON string or a decoded JSON value.

        Raises:
            InvalidScanReportError: If the value is not a valid expression
        """
        if isinstance(json, (str, bytes, bytearray)):
            json = json_util.parse(json)
        return ExpressionParser.from_json_node(json)

    @staticmethod
    def from_json_node(node: Any) -> Expression:
        """Parse an already decoded JSON value; strings are never re-parsed."""
        if isinstance(node, bool):
            return TRUE if node else FALSE
        if not isinstance(node, dict):
            raise InvalidScanReportError(
                f"Cannot parse expression from non-object: {json_util.to_literal(node)}"
            )

        type_name = json_util.get_string(TYPE, node)
        op = _operation(type_name)

        if op is Operation.TRUE:
            return TRUE
        if op is Operation.FALSE:
            return FALSE
        if op is Operation.AND:
            return And(
                ExpressionParser.from_json_node(json_util.get(LEFT, node)),
                ExpressionParser.from_json_node(json_util.get(RIGHT, node)),
            )
        if op is Operation.OR:
            return Or(
                ExpressionParser.from_json_node(json_util.get(LEFT, node)),
                ExpressionParser.from_json_node(json_util.get(RIGHT, node)),
            )
        if op is Operation.NOT:
            return Not(ExpressionParser.from_json_node(json_util.get(CHILD, node)))

        term = json_util.get_string(TERM, node)
        if op in UNARY_OPERATIONS:
            return UnboundPredicate(op, term)
        if op in LITERAL_OPERATIONS:
            return UnboundPredicate(op, term, (_literal(json_util.get(VALUE, node)),))

        values = json_util.get(VALUES, node)
        if not isinstance(values, list):
            raise InvalidScanReportError(
                f"Cannot parse values from non-array: {json_util.to_literal(values)}",
                field=VALUES,
            )
        return UnboundPredicate(op, term, tuple(_literal(value) for value in values))


def _operation(type_name: str) -> Operation:
    try:
        return Operation(type_name.lower())
    except ValueError:
        raise InvalidScanReportError(
            f"Invalid expression type: {type_name}", field=TYPE
        ) from None


def _literal(value: Any) -> Any:
    if value is None or not isinstance(value, _SCALAR_TYPES):
        raise InvalidScanReportError(
            f"Cannot parse literal from non-scalar: {json_util.to_literal(value)}"
        )
    return value
