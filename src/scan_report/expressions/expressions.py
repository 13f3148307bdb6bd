"""
Filter expressions.

A small boolean expression tree over unbound column references. It is the
filter a scan was planned with; this package only needs to carry it,
compare it and move it in and out of JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Tuple


class Operation(str, Enum):
    """Expression operations, valued by their JSON type name."""

    TRUE = "true"
    FALSE = "false"
    NOT = "not"
    AND = "and"
    OR = "or"
    IS_NULL = "is-null"
    NOT_NULL = "not-null"
    IS_NAN = "is-nan"
    NOT_NAN = "not-nan"
    LT = "lt"
    LT_EQ = "lt-eq"
    GT = "gt"
    GT_EQ = "gt-eq"
    EQ = "eq"
    NOT_EQ = "not-eq"
    STARTS_WITH = "starts-with"
    NOT_STARTS_WITH = "not-starts-with"
    IN = "in"
    NOT_IN = "not-in"


UNARY_OPERATIONS = frozenset(
    {Operation.IS_NULL, Operation.NOT_NULL, Operation.IS_NAN, Operation.NOT_NAN}
)
LITERAL_OPERATIONS = frozenset(
    {
        Operation.LT,
        Operation.LT_EQ,
        Operation.GT,
        Operation.GT_EQ,
        Operation.EQ,
        Operation.NOT_EQ,
        Operation.STARTS_WITH,
        Operation.NOT_STARTS_WITH,
    }
)
SET_OPERATIONS = frozenset({Operation.IN, Operation.NOT_IN})


class Expression:
    """Base class of all expressions."""

    @property
    def op(self) -> Operation:
        raise NotImplementedError


@dataclass(frozen=True)
class AlwaysTrue(Expression):
    @property
    def op(self) -> Operation:
        return Operation.TRUE

    def __str__(self) -> str:
        return "true"


@dataclass(frozen=True)
class AlwaysFalse(Expression):
    @property
    def op(self) -> Operation:
        return Operation.FALSE

    def __str__(self) -> str:
        return "false"


@dataclass(frozen=True)
class And(Expression):
    left: Expression
    right: Expression

    @property
    def op(self) -> Operation:
        return Operation.AND

    def __str__(self) -> str:
        return f"({self.left} and {self.right})"


@dataclass(frozen=True)
class Or(Expression):
    left: Expression
    right: Expression

    @property
    def op(self) -> Operation:
        return Operation.OR

    def __str__(self) -> str:
        return f"({self.left} or {self.right})"


@dataclass(frozen=True)
class Not(Expression):
    child: Expression

    @property
    def op(self) -> Operation:
        return Operation.NOT

    def __str__(self) -> str:
        return f"not({self.child})"


@dataclass(frozen=True)
class UnboundPredicate(Expression):
    """
    Predicate on a column name.

    ``values`` is empty for unary operations, holds one literal for
    comparisons and any number of literals for set operations.
    """

    operation: Operation
    term: str
    values: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if self.operation in UNARY_OPERATIONS and self.values:
            raise ValueError(f"Unary predicate {self.operation.value} takes no values")
        if self.operation in LITERAL_OPERATIONS and len(self.values) != 1:
            raise ValueError(f"Predicate {self.operation.value} takes exactly one value")
        if not (
            self.operation in UNARY_OPERATIONS
            or self.operation in LITERAL_OPERATIONS
            or self.operation in SET_OPERATIONS
        ):
            raise ValueError(f"Not a predicate operation: {self.operation.value}")

    @property
    def op(self) -> Operation:
        return self.operation

    @property
    def value(self) -> Any:
        """The literal of a comparison predicate."""
        return self.values[0]

    def __str__(self) -> str:
        if self.operation in UNARY_OPERATIONS:
            return f"{self.operation.value}({self.term})"
        if self.operation in SET_OPERATIONS:
            return f"{self.term} {self.operation.value} ({', '.join(map(repr, self.values))})"
        return f"{self.term} {self.operation.value} {self.value!r}"


TRUE = AlwaysTrue()
FALSE = AlwaysFalse()


def always_true() -> AlwaysTrue:
    return TRUE


def always_false() -> AlwaysFalse:
    return FALSE


def and_(left: Expression, right: Expression, *rest: Expression) -> Expression:
    """Conjunction, folding constant operands."""
    if rest:
        return and_(and_(left, right), *rest)
    if left == FALSE or right == FALSE:
        return FALSE
    if left == TRUE:
        return right
    if right == TRUE:
        return left
    return And(left, right)


def or_(left: Expression, right: Expression, *rest: Expression) -> Expression:
    """Disjunction, folding constant operands."""
    if rest:
        return or_(or_(left, right), *rest)
    if left == TRUE or right == TRUE:
        return TRUE
    if left == FALSE:
        return right
    if right == FALSE:
        return left
    return Or(left, right)


def not_(child: Expression) -> Expression:
    if child == TRUE:
        return FALSE
    if child == FALSE:
        return TRUE
    if isinstance(child, Not):
        return child.child
    return Not(child)


def is_null(term: str) -> UnboundPredicate:
    return UnboundPredicate(Operation.IS_NULL, term)


def not_null(term: str) -> UnboundPredicate:
    return UnboundPredicate(Operation.NOT_NULL, term)


def is_nan(term: str) -> UnboundPredicate:
    return UnboundPredicate(Operation.IS_NAN, term)


def not_nan(term: str) -> UnboundPredicate:
    return UnboundPredicate(Operation.NOT_NAN, term)


def less_than(term: str, value: Any) -> UnboundPredicate:
    return UnboundPredicate(Operation.LT, term, (value,))


def less_than_or_equal(term: str, value: Any) -> UnboundPredicate:
    return UnboundPredicate(Operation.LT_EQ, term, (value,))


def greater_than(term: str, value: Any) -> UnboundPredicate:
    return UnboundPredicate(Operation.GT, term, (value,))


def greater_than_or_equal(term: str, value: Any) -> UnboundPredicate:
    return UnboundPredicate(Operation.GT_EQ, term, (value,))


def equal(term: str, value: Any) -> UnboundPredicate:
    return UnboundPredicate(Operation.EQ, term, (value,))


def not_equal(term: str, value: Any) -> UnboundPredicate:
    return UnboundPredicate(Operation.NOT_EQ, term, (value,))


def starts_with(term: str, value: str) -> UnboundPredicate:
    return UnboundPredicate(Operation.STARTS_WITH, term, (value,))


def not_starts_with(term: str, value: str) -> UnboundPredicate:
    return UnboundPredicate(Operation.NOT_STARTS_WITH, term, (value,))


def in_(term: str, values: Iterable[Any]) -> UnboundPredicate:
    return UnboundPredicate(Operation.IN, term, tuple(values))


def not_in(term: str, values: Iterable[Any]) -> UnboundPredicate:
    return UnboundPredicate(Operation.NOT_IN, term, tuple(values))
