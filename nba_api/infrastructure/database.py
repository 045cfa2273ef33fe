"""MongoDB Store — one shared AsyncMongoClient with error mapping and a startup ping.

Invariants:
    - One client per process, opened in the lifespan, shared read-only by all requests
    - Every driver operation bounded by timeoutMS (no request hangs forever)
    - Dates decoded tz-aware in UTC
    - All pymongo exceptions mapped to DatabaseError (core/errors.py)

Design Decisions:
    - Store held on app.state and injected via get_store: no module-level client
    - Client passed into MongoStore: tests hand in a mocked client, production
      builds one with from_settings()
"""

import logging
from contextlib import asynccontextmanager
from datetime import timezone
from typing import Any, AsyncIterator

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import (
    ConnectionFailure, OperationFailure, PyMongoError,
    ServerSelectionTimeoutError,
)

from nba_api.config import Settings
from nba_api.core.errors import DatabaseError, ErrorContext
from nba_api.core.repository_protocols import DocumentStore

logger = logging.getLogger(__name__)


class MongoStore:
    """Read-only access to the nba database over a single shared client."""

    def __init__(
        self, client: AsyncMongoClient, database: str,
        players_collection: str = "players",
    ):
        self.client = client
        self.database = database
        self.players_collection = players_collection
        self._players = client[database][players_collection]

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        client = AsyncMongoClient(
            settings.mongo_url,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            timeoutMS=settings.mongo_timeout_ms,
            tz_aware=True,
            tzinfo=timezone.utc,
        )
        return cls(client, settings.mongo_database, settings.players_collection)

    @asynccontextmanager
    async def _translate_errors(
        self, operation: str, collection: str | None = None,
    ) -> AsyncIterator[None]:
        ctx = ErrorContext(database=self.database, collection=collection)
        try:
            yield
        except ServerSelectionTimeoutError as e:
            logger.error(f"MongoDB server selection timed out: {e}")
            raise DatabaseError("No reachable server", operation, ctx) from e
        except ConnectionFailure as e:
            logger.error(f"MongoDB connection failure: {e}")
            raise DatabaseError("Connection failure", operation, ctx) from e
        except OperationFailure as e:
            logger.error(f"MongoDB operation failure (code={e.code}): {e}")
            raise DatabaseError("Command rejected by server", operation, ctx) from e
        except PyMongoError as e:
            logger.error(f"MongoDB driver error: {e}")
            raise DatabaseError("Driver error", operation, ctx) from e

    async def ping(self) -> None:
        """Round-trip to the server (startup connectivity check)."""
        async with self._translate_errors("connect"):
            await self.client.admin.command("ping")

    async def server_version(self) -> str:
        """Version string from the serverStatus admin command."""
        async with self._translate_errors("server_status"):
            info = await self.client.admin.command("serverStatus")
        version = info.get("version")
        if not version:
            raise DatabaseError(
                "serverStatus reply has no version field", "server_status",
                ErrorContext(database="admin"),
            )
        return str(version)

    async def list_players(self) -> list[dict[str, Any]]:
        """Every document in the players collection, unfiltered and unprojected."""
        async with self._translate_errors("find_players", self.players_collection):
            players = await self._players.find({}).to_list()
        logger.debug(
            "Fetched players",
            extra={
                "collection": self.players_collection,
                "document_count": len(players),
            },
        )
        return players

    async def close(self) -> None:
        await self.client.close()


def get_store(request: Request) -> DocumentStore:
    """FastAPI dependency for the shared document store."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise DatabaseError("Store not initialized", "connect")
    return store
