"""Boundary Protocols — contract between the route handlers and the document store.

Invariants:
    - Routes depend on DocumentStore, never on pymongo types
    - Every method raises DatabaseError (core/errors.py) on failure, nothing else

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests inject a plain fake store
"""

from typing import Any, Protocol


class DocumentStore(Protocol):
    """Read-only access to the nba database — implemented by infrastructure/database.py."""
    async def ping(self) -> None: ...
    async def server_version(self) -> str: ...
    async def list_players(self) -> list[dict[str, Any]]: ...
    async def close(self) -> None: ...
