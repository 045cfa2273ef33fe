"""NBA API Package — read-only HTTP probes over the nba MongoDB database.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
