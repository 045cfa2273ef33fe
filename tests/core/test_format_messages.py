"""Tests for probe message formatting — pure, no IO."""

import platform

from nba_api.core.format_messages import (
    format_mongo_version, format_runtime_version,
)


def test_runtime_version_defaults_to_interpreter():
    assert format_runtime_version() == (
        "This app is using node version: " + platform.python_version()
    )


def test_runtime_version_explicit():
    assert format_runtime_version("3.12.1") == "This app is using node version: 3.12.1"


def test_mongo_version_message():
    assert format_mongo_version("7.0.14") == (
        "This app is connected with MongoDB version 7.0.14"
    )
