"""Shared pytest fixtures for versioninfo tests."""

from unittest.mock import patch

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_loguru():
    """Keep versioninfo logging off, its default, around every test."""
    logger.disable("versioninfo")
    yield
    logger.disable("versioninfo")


@pytest.fixture
def mock_settings():
    """Patch settings everywhere they are read, with nothing configured."""
    with (
        patch("versioninfo.models.settings") as models_settings,
        patch("versioninfo.version.settings", new=models_settings),
    ):
        models_settings.cfg_version = None
        models_settings.cfg_release_channel = None
        models_settings.git_executable = "git"
        yield models_settings


class FakeRunner:
    """Process runner that returns canned stdout instead of spawning git."""

    def __init__(self, outputs: dict[tuple[str, ...], bytes | None] | None = None):
        self.outputs = outputs or {}
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    def run(self, command, args):
        self.calls.append((command, tuple(args)))
        return self.outputs.get(tuple(args))


@pytest.fixture
def fake_runner():
    """Fake runner with no canned output (behaves like a missing git)."""
    return FakeRunner()
