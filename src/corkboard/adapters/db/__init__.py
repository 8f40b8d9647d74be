"""Relational database plumbing: engine factory, types, schema and migrations."""
