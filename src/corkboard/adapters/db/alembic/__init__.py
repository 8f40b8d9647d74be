"""Alembic migration environment for corkboard (see `corkboard.config`)."""
