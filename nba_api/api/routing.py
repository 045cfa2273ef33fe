"""Prefix Routing — mount one endpoint on a path prefix for every HTTP method.

Invariants:
    - `/prefix`, `/prefix/` and `/prefix/a/b` reach the endpoint; `/prefixes` does not
    - Every standard method, TRACE and CONNECT included, reaches the endpoint;
      non-standard verbs (e.g. PROPFIND) get 405
"""

from typing import Any, Callable

from fastapi import APIRouter

ANY_METHOD = [
    "GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT",
]


def mount_prefix(router: APIRouter, endpoint: Callable[..., Any], **kwargs: Any) -> None:
    """Register endpoint on the router's prefix and on all sub-paths below it."""
    router.add_api_route("", endpoint, methods=ANY_METHOD, **kwargs)
    router.add_api_route(
        "/{subpath:path}", endpoint, methods=ANY_METHOD,
        include_in_schema=False, **kwargs,
    )
