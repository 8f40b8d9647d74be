"""Domain layer: value types, sanitization and validation rules.

Nothing in here performs I/O. Anything that needs storage (e.g. the
availability of a username) is passed in as a callable.
"""
