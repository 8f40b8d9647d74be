"""Interface for deriving and checking password digests."""

import abc

from corkboard.domain.model import Credentials


class PasswordHasher(abc.ABC):
    """Contract for a salted password hasher."""

    @abc.abstractmethod
    def hash(self, secret: str) -> Credentials:
        """Derive a digest from `secret` with a freshly generated salt.

        Returns:
            Credentials: The hex digest and the salt used to produce it.
        """

    @abc.abstractmethod
    def verify(self, secret: str, credentials: Credentials) -> bool:
        """Return True if `secret` produces the digest stored in `credentials`."""
