"""Infrastructure Layer — MongoDB client wrapper and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - Every driver failure is mapped to DatabaseError (core/errors.py)
"""
