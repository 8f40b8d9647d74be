"""Abstract ports implemented by corkboard's adapters."""
