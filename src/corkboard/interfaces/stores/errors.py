"""Exceptions raised by user and board stores."""


class StoreError(Exception):
    """Base class for store errors."""


class DuplicateUserError(StoreError):
    """Conflict: a unique user column already holds the value.

    Raised when an insert loses a race that the availability pre-check could
    not see. Callers may retry the whole registration.

    Attributes:
        field (str): The conflicting column ("id", "username" or "email").
        value (str): The value that is already stored.
    """

    def __init__(self, field: str, value: str):
        super().__init__(f"A user with {field} '{value}' already exists.")
        self.field = field
        self.value = value


class UnknownUserError(StoreError):
    """Referential integrity: no user exists with the given id.

    Attributes:
        user_id (str): The id that did not resolve to a user.
    """

    def __init__(self, user_id: str):
        super().__init__(f"User '{user_id}' does not exist.")
        self.user_id = user_id
