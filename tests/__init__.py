"""corkboard test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with a database (SQLite file, Postgres) or filesystem.
- functional/   : User-visible flows (the ``corkboard users`` commands) at the boundary.
- contract/     : Behavior shared by every implementation of a port (stores, id generators).
- e2e/          : Full CLI runs including logging setup.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer the in-memory adapters over mocks.
- Contract tests parametrize implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
