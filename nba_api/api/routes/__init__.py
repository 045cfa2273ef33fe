"""Route Modules — one file per path prefix.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Each route is registered for the bare prefix and every sub-path below it
"""
