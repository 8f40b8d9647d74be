"""Domain-layer error definitions."""

from __future__ import annotations

from collections.abc import Sequence

from .model import FieldViolation


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Raised when user input breaks one or more field rules.

    Every rule is evaluated before this is raised, so `validation` always
    lists all the problems with the input, not just the first one.

    Attributes:
        violations (tuple[FieldViolation, ...]): The failed rules, in field order.
        validation (list[dict[str, str]]): The same failures as
            ``{"field": ..., "message": ...}`` dicts, ready for a response body.
    """

    def __init__(self, violations: Sequence[FieldViolation]) -> None:
        self.violations = tuple(violations)
        super().__init__(
            "Invalid input: "
            + "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        )

    @property
    def validation(self) -> list[dict[str, str]]:
        """Return the failures as plain dicts."""
        return [v.as_dict() for v in self.violations]
