"""Server Status Probe — reports the MongoDB server version via serverStatus.

Invariants:
    - 200 with the version message when the admin command succeeds
    - Any DatabaseError propagates to the global handler → 500, empty body
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from nba_api.api.routing import mount_prefix
from nba_api.core.format_messages import format_mongo_version
from nba_api.core.repository_protocols import DocumentStore
from nba_api.infrastructure.database import get_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/mongo", tags=["status"])


async def mongo_version(
    store: DocumentStore = Depends(get_store),
) -> PlainTextResponse:
    version = await store.server_version()
    logger.debug("serverStatus ok", extra={"mongo_version": version})
    return PlainTextResponse(format_mongo_version(version))


mount_prefix(router, mongo_version, response_class=PlainTextResponse)
