# bgplanner/services/predicate.py

"""Parsing and evaluation of single filter predicates.

A predicate is one ``field operator value`` clause of a filter expression.
Parsing never fails: a clause that cannot be understood becomes an inert
predicate, which lets every record through. Evaluation reports a
three-valued PredicateOutcome so the inert path is visible to callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from bgplanner.core.errors import InvalidFieldError
from bgplanner.core.game_data import GameData
from bgplanner.services.operations import Operation

if TYPE_CHECKING:
    from bgplanner.core.board_game import BoardGame

__all__ = ["Predicate", "PredicateOutcome"]

logger = logging.getLogger("bgplanner.predicate")


class PredicateOutcome(Enum):
    """Result of evaluating a predicate against one record."""

    MATCHED = "matched"
    NOT_MATCHED = "not_matched"
    INERT = "inert"

    @property
    def passes(self) -> bool:
        """True unless the record was rejected."""
        return self is not PredicateOutcome.NOT_MATCHED


@dataclass(frozen=True)
class Predicate:
    """A parsed filter clause.

    Attributes:
        raw: The clause text as given (trimmed).
        field: Resolved field, or None when inert.
        operation: Resolved operator, or None when inert.
        value: Value token (trimmed).
        number: Parsed value for numeric fields.
        inert_reason: Why the clause has no effect; empty when active.
    """

    raw: str
    field: GameData | None = None
    operation: Operation | None = None
    value: str = ""
    number: float | None = None
    inert_reason: str = ""

    @property
    def is_inert(self) -> bool:
        return bool(self.inert_reason)

    @classmethod
    def parse(cls, text: str) -> Predicate:
        """Parses one clause such as ``"name~=catan"`` or ``"rank < 100"``.

        Args:
            text: The clause text.

        Returns:
            An active Predicate, or an inert one carrying its reason.
        """
        raw = (text or "").strip()

        operation = Operation.get_operator_from_str(raw)
        if operation is None:
            return cls._inert(raw, "no operator")

        parts = raw.split(operation.token)
        if len(parts) != 2:
            return cls._inert(raw, f"expected one {operation.token!r}")

        field_token, value = parts[0].strip(), parts[1].strip()
        if not field_token or not value:
            return cls._inert(raw, "missing field or value")

        try:
            field = GameData.from_string(field_token)
        except InvalidFieldError:
            return cls._inert(raw, f"unknown field {field_token!r}")

        if not field.is_numeric:
            return cls(raw=raw, field=field, operation=operation, value=value)

        if operation is Operation.CONTAINS:
            return cls._inert(raw, f"{operation.token!r} does not apply to numeric field {field.value!r}")

        try:
            number = float(value)
        except ValueError:
            return cls._inert(raw, f"not a number: {value!r}")

        return cls(raw=raw, field=field, operation=operation, value=value, number=number)

    @classmethod
    def _inert(cls, raw: str, reason: str) -> Predicate:
        logger.debug("Ignoring filter clause %r: %s", raw, reason)
        return cls(raw=raw, inert_reason=reason)

    def evaluate(self, game: BoardGame) -> PredicateOutcome:
        """Evaluates this predicate against a record.

        Args:
            game: The record to test.

        Returns:
            MATCHED or NOT_MATCHED for an active predicate, INERT otherwise.
        """
        if self.is_inert:
            return PredicateOutcome.INERT

        if self.field.is_numeric:
            matched = self.operation.compare_numbers(game.get_numeric_value(self.field), self.number)
        else:
            matched = self.operation.compare_text(game.get_string_value(self.field), self.value)

        return PredicateOutcome.MATCHED if matched else PredicateOutcome.NOT_MATCHED
