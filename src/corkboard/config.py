"""Runtime settings read from ``CORKBOARD_*`` environment variables.

- ``CORKBOARD_DB_URL``: SQLAlchemy URL of the account database (required).
- ``CORKBOARD_ID_GENERATOR``: which id generator the bootstrap wires in
  (``short``, ``ulid`` or ``uuid4``; default ``short``).
- ``CORKBOARD_HASH_ITERATIONS``: PBKDF2 work factor for new password hashes.

Also builds the Alembic configuration for the packaged migrations.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "CORKBOARD_DB_URL"
ID_GENERATOR_ENV_VAR = "CORKBOARD_ID_GENERATOR"
HASH_ITERATIONS_ENV_VAR = "CORKBOARD_HASH_ITERATIONS"

ID_GENERATORS = ("short", "ulid", "uuid4")
DEFAULT_ID_GENERATOR = "short"

MIGRATIONS_PACKAGE = "corkboard.adapters.db.alembic"


class ConfigError(ValueError):
    """A ``CORKBOARD_*`` variable holds a value corkboard cannot use."""


class DatabaseUrlNotSetError(Exception):
    """Raised when the CORKBOARD_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Return `CORKBOARD_DB_URL`.

    Raises:
        DatabaseUrlNotSetError: If the variable is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url


def get_id_generator_name() -> str:
    """Return the configured id generator name, lowercased.

    Raises:
        ConfigError: If the name is not one of `ID_GENERATORS`.
    """
    name = (os.environ.get(ID_GENERATOR_ENV_VAR) or DEFAULT_ID_GENERATOR).strip().lower()
    if name not in ID_GENERATORS:
        raise ConfigError(
            f"{ID_GENERATOR_ENV_VAR}={name!r}; expected one of {', '.join(ID_GENERATORS)}"
        )
    return name


def get_hash_iterations() -> int | None:
    """Return the configured PBKDF2 iteration count, or None to use the default.

    Raises:
        ConfigError: If the value is not a positive integer.
    """
    if not (raw := os.environ.get(HASH_ITERATIONS_ENV_VAR, "").strip()):
        return None
    try:
        iterations = int(raw)
    except ValueError as e:
        raise ConfigError(f"{HASH_ITERATIONS_ENV_VAR} must be an integer, got {raw!r}") from e
    if iterations < 1:
        raise ConfigError(f"{HASH_ITERATIONS_ENV_VAR} must be positive, got {iterations}")
    return iterations


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Return an Alembic `Config` for the migrations shipped in `MIGRATIONS_PACKAGE`.

    No ``alembic.ini`` is read; only ``script_location`` and, when given,
    ``sqlalchemy.url`` are set.

    Args:
        db_url: Database to migrate. Commands that only read the scripts
            (``heads``, ``history``) work without one.
        stdout: Where Alembic prints its status lines.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option("sqlalchemy.url", db_url)
    cfg.set_main_option("script_location", str(files(MIGRATIONS_PACKAGE)))
    return cfg
