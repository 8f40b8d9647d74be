"""Store-backed validation of registration input.

These functions work on an already-entered `UserStore` so that handlers can
validate and insert inside one unit of work. `corkboard.service_layer.views`
wraps them for callers that only want an answer.

The availability check is a user-experience fast path: two registrations can
both pass it before either inserts. The unique constraints in storage decide
the race and the loser gets a `DuplicateUserError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from corkboard.domain.errors import ValidationError
from corkboard.domain.users import AVAILABILITY_FIELDS, find_violations, sanitize
from corkboard.interfaces.stores import UserStore

logger = logging.getLogger(__name__)


def check_availability(users: UserStore, field: str, value: str) -> bool:
    """Return True if no user has `value` (case-insensitively) as `field`.

    Raises:
        ValueError: If `field` is not "username" or "email".
    """
    if field not in AVAILABILITY_FIELDS:
        raise ValueError(
            f"Availability can only be checked for {sorted(AVAILABILITY_FIELDS)}, "
            f"not {field!r}"
        )
    return not users.exists(field, value.lower())


def validate(users: UserStore, props: Mapping[str, Any]) -> None:
    """Check registration input against every rule.

    Raises:
        ValidationError: Listing every violated rule, if any.
    """
    violations = find_violations(
        sanitize(props), lambda field, value: check_availability(users, field, value)
    )
    if violations:
        logger.debug(
            "Registration input rejected: %s",
            ", ".join(f"{v.field}: {v.message}" for v in violations),
        )
        raise ValidationError(violations)
