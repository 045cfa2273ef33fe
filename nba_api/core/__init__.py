"""Core Layer — pure helpers, no IO, no async, no database driver calls.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
"""
