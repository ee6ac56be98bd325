"""Tests for EnvReader class."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from vto.config.env import EnvReader


class TestEnvReaderGetStr:
    """Tests for EnvReader.get_str method."""

    def test_returns_value_when_set(self) -> None:
        reader = EnvReader(env={"VTO_PRESET": "medium"})
        assert reader.get_str("VTO_PRESET") == "medium"

    def test_returns_default_when_not_set(self) -> None:
        reader = EnvReader(env={})
        assert reader.get_str("VTO_PRESET", "fast") == "fast"

    def test_returns_none_when_not_set_and_no_default(self) -> None:
        reader = EnvReader(env={})
        assert reader.get_str("VTO_PRESET") is None

    def test_empty_string_is_a_value(self) -> None:
        """An empty variable is set, not missing."""
        reader = EnvReader(env={"VTO_MAX_BITRATE": ""})
        assert reader.get_str("VTO_MAX_BITRATE", "2000k") == ""


class TestEnvReaderGetInt:
    """Tests for EnvReader.get_int method."""

    def test_parses_integer(self) -> None:
        reader = EnvReader(env={"VTO_THREADS": "4"})
        assert reader.get_int("VTO_THREADS") == 4

    def test_returns_default_when_not_set(self) -> None:
        reader = EnvReader(env={})
        assert reader.get_int("VTO_THREADS", 0) == 0

    def test_invalid_returns_default_and_warns(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        reader = EnvReader(env={"VTO_THREADS": "many"})
        with caplog.at_level(logging.WARNING, logger="vto.config.env"):
            assert reader.get_int("VTO_THREADS", 2) == 2

        assert "Invalid integer value for VTO_THREADS: many" in caplog.text


class TestEnvReaderGetBool:
    """Tests for EnvReader.get_bool method."""

    @pytest.mark.parametrize("value", ["true", "1", "yes", "on", "TRUE", "Yes"])
    def test_truthy_values(self, value: str) -> None:
        reader = EnvReader(env={"FLAG": value})
        assert reader.get_bool("FLAG") is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "off", ""])
    def test_falsy_values(self, value: str) -> None:
        reader = EnvReader(env={"FLAG": value})
        assert reader.get_bool("FLAG") is False

    def test_returns_default_when_not_set(self) -> None:
        reader = EnvReader(env={})
        assert reader.get_bool("FLAG", True) is True


class TestEnvReaderGetPath:
    """Tests for EnvReader.get_path method."""

    def test_returns_path(self) -> None:
        reader = EnvReader(env={"VTO_LOG_FILE": "/var/log/vto.log"})
        assert reader.get_path("VTO_LOG_FILE") == Path("/var/log/vto.log")

    def test_expands_tilde(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        reader = EnvReader(env={"VTO_LOG_FILE": "~/logs/vto.log"})
        assert reader.get_path("VTO_LOG_FILE") == tmp_path / "logs" / "vto.log"

    def test_returns_default_when_not_set(self) -> None:
        reader = EnvReader(env={})
        assert reader.get_path("VTO_LOG_FILE") is None


class TestEnvReaderDefaultsToOsEnviron:
    """EnvReader without an explicit mapping reads os.environ."""

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VTO_PRESET", "slow")
        assert EnvReader().get_str("VTO_PRESET") == "slow"
