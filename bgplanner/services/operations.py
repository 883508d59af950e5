# bgplanner/services/operations.py

"""Comparison operators recognised in filter expressions.

Each Operation carries its textual token. Tokens are detected
longest-first so that ``>`` is never matched inside ``>=``.
"""

from __future__ import annotations

from enum import Enum

__all__ = ["Operation"]


class Operation(Enum):
    """Comparison operators for filter predicates.

    CONTAINS (``~=``) only applies to text fields.
    """

    EQUALS = "=="
    NOT_EQUALS = "!="
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_THAN_EQUALS = ">="
    LESS_THAN_EQUALS = "<="
    CONTAINS = "~="

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def get_operator_from_str(cls, text: str) -> Operation | None:
        """Finds the operator present in a predicate string.

        Tokens are tried longest first, then in declaration order. The
        position of a token in the text does not matter, so
        ``"name~=a>=b"`` resolves to ``>=`` because ``>=`` is declared
        before ``~=``.

        Args:
            text: A single predicate such as ``"minPlayers>=2"``.

        Returns:
            The first matching Operation, or None if the text holds no operator.
        """
        for operation in _BY_LENGTH:
            if operation.value in text:
                return operation
        return None

    def compare_numbers(self, left: float, right: float) -> bool:
        """Applies this operator to two numbers.

        Raises:
            ValueError: For CONTAINS, which has no numeric meaning.
        """
        if self is Operation.EQUALS:
            return left == right
        if self is Operation.NOT_EQUALS:
            return left != right
        if self is Operation.GREATER_THAN:
            return left > right
        if self is Operation.LESS_THAN:
            return left < right
        if self is Operation.GREATER_THAN_EQUALS:
            return left >= right
        if self is Operation.LESS_THAN_EQUALS:
            return left <= right
        raise ValueError(f"Operator {self.value} does not apply to numbers")

    def compare_text(self, left: str, right: str) -> bool:
        """Applies this operator to two strings, ignoring case."""
        left_lower = left.lower()
        right_lower = right.lower()

        if self is Operation.CONTAINS:
            return right_lower in left_lower
        if self is Operation.EQUALS:
            return left_lower == right_lower
        if self is Operation.NOT_EQUALS:
            return left_lower != right_lower
        if self is Operation.GREATER_THAN:
            return left_lower > right_lower
        if self is Operation.LESS_THAN:
            return left_lower < right_lower
        if self is Operation.GREATER_THAN_EQUALS:
            return left_lower >= right_lower
        return left_lower <= right_lower


# sorted() is stable, so equal-length tokens keep declaration order
_BY_LENGTH: tuple[Operation, ...] = tuple(sorted(Operation, key=lambda op: len(op.value), reverse=True))
