"""
Expressions Package - Scan Filters.

Unbound boolean expressions describing which rows a scan selected,
plus their JSON form.
"""

from scan_report.expressions.expressions import (
    AlwaysFalse,
    AlwaysTrue,
    And,
    Expression,
    Not,
    Operation,
    Or,
    UnboundPredicate,
    always_false,
    always_true,
    and_,
    equal,
    greater_than,
    greater_than_or_equal,
    in_,
    is_nan,
    is_null,
    less_than,
    less_than_or_equal,
    not_,
    not_equal,
    not_in,
    not_nan,
    not_null,
    not_starts_with,
    or_,
    starts_with,
)
from scan_report.expressions.parser import ExpressionParser

__all__ = [
    "AlwaysFalse",
    "AlwaysTrue",
    "And",
    "Expression",
    "ExpressionParser",
    "Not",
    "Operation",
    "Or",
    "UnboundPredicate",
    "always_false",
    "always_true",
    "and_",
    "equal",
    "greater_than",
    "greater_than_or_equal",
    "in_",
    "is_nan",
    "is_null",
    "less_than",
    "less_than_or_equal",
    "not_",
    "not_equal",
    "not_in",
    "not_nan",
    "not_null",
    "not_starts_with",
    "or_",
    "starts_with",
]
