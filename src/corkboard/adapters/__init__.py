"""Concrete implementations of corkboard's ports."""
