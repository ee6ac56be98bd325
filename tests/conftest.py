"""Shared test fixtures for VTO."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from vto.domain import VideoStreamInfo

_VTO_ENV_VARS = (
    "VTO_TARGET_VIDEO_CODEC",
    "VTO_PRESET",
    "VTO_MAX_BITRATE",
    "VTO_TWO_PASS",
    "VTO_THREADS",
    "VTO_ACCEL",
    "VTO_LOG_LEVEL",
    "VTO_LOG_FILE",
    "VTO_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the user's config file and VTO_* variables out of tests."""
    for var in _VTO_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("VTO_CONFIG_PATH", str(tmp_path / "missing-config.yaml"))


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def landscape_1080p() -> VideoStreamInfo:
    """1920x1080 stream without rotation."""
    return VideoStreamInfo(height=1080, width=1920)


@pytest.fixture
def portrait_1080p() -> VideoStreamInfo:
    """1080x1920 stream without rotation."""
    return VideoStreamInfo(height=1920, width=1080)


@pytest.fixture
def landscape_480p() -> VideoStreamInfo:
    """854x480 stream, below the default 720 target."""
    return VideoStreamInfo(height=480, width=854)


@pytest.fixture
def config_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write a YAML config file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
