"""Unit tests for the project logging module."""

from __future__ import annotations

import io
import logging
import sys

import pytest

from bracket_sim.utils.logger import (
    DEBUG,
    ENV_VAR,
    NORMAL,
    QUIET,
    VERBOSE,
    configure_logging,
    get_logger,
    resolve_level,
)

_ROOT = "bracket_sim"


@pytest.mark.smoke
class TestResolveLevel:
    """Tests for `resolve_level`."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("QUIET", 30), ("NORMAL", 20), ("VERBOSE", 15), ("DEBUG", 10), ("verbose", 15)],
    )
    def test_known_levels(self, name: str, expected: int) -> None:
        assert resolve_level(name) == expected

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level 'TRACE'"):
            resolve_level("TRACE")

    def test_env_var_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_VAR, "debug")
        assert resolve_level() == DEBUG

    def test_explicit_level_beats_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_VAR, "DEBUG")
        assert resolve_level("QUIET") == QUIET

    def test_default_is_normal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(ENV_VAR, raising=False)
        assert resolve_level() == NORMAL


@pytest.mark.smoke
class TestConfigureLogging:
    """Tests for `configure_logging`."""

    def test_sets_root_level(self) -> None:
        configure_logging("VERBOSE")
        assert logging.getLogger(_ROOT).level == VERBOSE

    def test_defaults_to_stderr(self) -> None:
        configure_logging("NORMAL")
        handlers = logging.getLogger(_ROOT).handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].stream is sys.stderr

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging("NORMAL")
        configure_logging("DEBUG")
        assert len(logging.getLogger(_ROOT).handlers) == 1

    def test_no_propagation(self) -> None:
        configure_logging("NORMAL")
        assert logging.getLogger(_ROOT).propagate is False

    def test_format_and_filtering(self) -> None:
        stream = io.StringIO()
        configure_logging("NORMAL", stream=stream)
        log = get_logger("simulation")
        log.info("visible")
        log.log(VERBOSE, "hidden")
        output = stream.getvalue()
        assert " | bracket_sim.simulation | INFO     | visible" in output
        assert "hidden" not in output

    def test_verbose_level_name(self) -> None:
        stream = io.StringIO()
        configure_logging("VERBOSE", stream=stream)
        get_logger("simulation").log(VERBOSE, "region done")
        assert "VERBOSE" in stream.getvalue()

    def test_invalid_level(self) -> None:
        with pytest.raises(ValueError, match="Valid levels"):
            configure_logging("LOUD")


@pytest.mark.smoke
def test_get_logger_namespaced() -> None:
    assert get_logger("cli").name == "bracket_sim.cli"
    assert get_logger("simulation.engine").name == "bracket_sim.simulation.engine"
