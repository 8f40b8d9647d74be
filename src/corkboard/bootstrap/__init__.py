"""Bootstrap (composition root) for corkboard.

Assembles the application at runtime: wires concrete adapters (stores, unit
of work, id generator, password hasher) into the service-layer handlers and
message bus, and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- Inner layers must not import `corkboard.bootstrap`.
- No business rules live here; this is assembly only.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus

__all__ = ["AppContainer", "bootstrap", "build_message_bus"]
