"""Service layer: commands, their handlers, the message bus and read views."""
