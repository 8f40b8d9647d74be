"""corkboard

Account and board data-access core for a pin-board web backend.
It registers users, validates and hashes their credentials, answers
point lookups, and creates boards owned by a user.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
