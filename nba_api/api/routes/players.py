"""Player Listing — the whole players collection as a JSON array.

Invariants:
    - Empty filter, no projection, no pagination: every stored document is returned
    - Documents pass through unchanged apart from BSON scalar encoding (core/documents.py)
    - Any DatabaseError propagates to the global handler → 500, empty body
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from nba_api.api.routing import mount_prefix
from nba_api.core.documents import encode_documents
from nba_api.core.repository_protocols import DocumentStore
from nba_api.infrastructure.database import get_store

router = APIRouter(prefix="/data", tags=["players"])


async def list_players(
    store: DocumentStore = Depends(get_store),
) -> JSONResponse:
    players = await store.list_players()
    return JSONResponse(content=encode_documents(players))


mount_prefix(router, list_players, response_class=JSONResponse)
