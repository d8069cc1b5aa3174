"""Shared pytest fixtures for eventhub tests."""

from __future__ import annotations

import pytest

from tests.helpers.hub import Credentials, RecordingHub


@pytest.fixture
def hub() -> RecordingHub:
    """Fresh recording hub per test."""
    return RecordingHub()


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username="alice", token="s3cr3t")
