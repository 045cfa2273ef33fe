"""Probe Messages — plain-text bodies for the runtime and server status probes.

Invariants:
    - Message prefixes are fixed strings; monitoring scripts match on them
    - Pure functions, no IO
"""

import platform

RUNTIME_VERSION_PREFIX = "This app is using node version: "
MONGO_VERSION_PREFIX = "This app is connected with MongoDB version "


def format_runtime_version(version: str | None = None) -> str:
    """Body for /node. Defaults to the running interpreter's version."""
    return RUNTIME_VERSION_PREFIX + (version or platform.python_version())


def format_mongo_version(version: str) -> str:
    """Body for /mongo."""
    return MONGO_VERSION_PREFIX + version
