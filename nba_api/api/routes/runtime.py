"""Runtime Probe — reports the interpreter version serving the app.

Invariants:
    - Always 200: never touches the document store, works while the database is down
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from nba_api.api.routing import mount_prefix
from nba_api.core.format_messages import format_runtime_version

router = APIRouter(prefix="/node", tags=["runtime"])


async def runtime_version() -> PlainTextResponse:
    return PlainTextResponse(format_runtime_version())


mount_prefix(router, runtime_version, response_class=PlainTextResponse)
