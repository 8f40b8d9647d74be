"""Storage ports for users and boards."""

from .boards import BoardStore
from .errors import DuplicateUserError, StoreError, UnknownUserError
from .users import LOOKUP_FIELDS, USER_FIELDS, UserStore

__all__ = [
    "BoardStore",
    "DuplicateUserError",
    "LOOKUP_FIELDS",
    "StoreError",
    "UnknownUserError",
    "USER_FIELDS",
    "UserStore",
]
