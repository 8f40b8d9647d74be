"""The ``corkboard`` operator command line."""
