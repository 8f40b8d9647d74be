"""Entry points into corkboard."""
