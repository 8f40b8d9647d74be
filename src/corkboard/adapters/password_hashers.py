"""Password hashers for corkboard."""

import hashlib
import hmac
import secrets

from corkboard.domain.model import Credentials
from corkboard.interfaces.password_hasher import PasswordHasher

# pylint: disable=too-few-public-methods

DEFAULT_ITERATIONS = 260_000
SALT_BYTES = 16
DIGEST_BYTES = 16  # 32 hex characters


class Pbkdf2PasswordHasher(PasswordHasher):
    """Salted PBKDF2-HMAC-SHA256.

    Each call to `hash` draws a new random salt. The derived key is truncated
    to 16 bytes so the stored digest is 32 lowercase hex characters, which is
    the column format the ``users`` table has always used.

    Args:
        iterations: PBKDF2 work factor. Tests pass a small number.
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS) -> None:
        if iterations < 1:
            raise ValueError(f"iterations must be positive, got {iterations}")
        self.iterations = iterations

    def _derive(self, secret: str, salt: str) -> str:
        return hashlib.pbkdf2_hmac(
            "sha256",
            secret.encode("utf-8"),
            salt.encode("ascii"),
            self.iterations,
            dklen=DIGEST_BYTES,
        ).hex()

    def hash(self, secret: str) -> Credentials:
        salt = secrets.token_hex(SALT_BYTES)
        return Credentials(hash=self._derive(secret, salt), salt=salt)

    def verify(self, secret: str, credentials: Credentials) -> bool:
        candidate = self._derive(secret, credentials.salt)
        return hmac.compare_digest(candidate, credentials.hash)
