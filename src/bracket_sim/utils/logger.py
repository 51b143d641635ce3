"""Project logging with four verbosity levels.

Everything under ``bracket_sim`` logs through the standard `logging`
module beneath a single ``bracket_sim`` root logger.  Verbosity is chosen
by name:

    ========  ==============  =====
    Name      Python level    Value
    ========  ==============  =====
    QUIET     WARNING          30
    NORMAL    INFO             20
    VERBOSE   VERBOSE (custom) 15
    DEBUG     DEBUG            10
    ========  ==============  =====

The simulation engine reports region champions at ``VERBOSE`` and every
single game at ``DEBUG``, so ``NORMAL`` keeps a 63-game bracket run quiet.

Usage::

    >>> from bracket_sim.utils.logger import configure_logging, get_logger
    >>> configure_logging("VERBOSE")
    >>> log = get_logger("simulation")
    >>> log.info("Simulating bracket...")

When no level is passed, ``BRACKET_SIM_LOG_LEVEL`` (case-insensitive) is
consulted before falling back to ``NORMAL``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

VERBOSE: int = 15
"""Custom level between INFO and DEBUG (per-region progress)."""

logging.addLevelName(VERBOSE, "VERBOSE")

QUIET: int = logging.WARNING
"""Only warnings and errors (e.g. skipped first-round pairings)."""

NORMAL: int = logging.INFO
"""Default verbosity."""

DEBUG: int = logging.DEBUG
"""Per-game diagnostic output."""

_LEVEL_MAP: dict[str, int] = {
    "QUIET": QUIET,
    "NORMAL": NORMAL,
    "VERBOSE": VERBOSE,
    "DEBUG": DEBUG,
}

ENV_VAR: str = "BRACKET_SIM_LOG_LEVEL"

_ROOT_LOGGER_NAME: str = "bracket_sim"
_LOG_FORMAT: str = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"


def resolve_level(level: str | None = None) -> int:
    """Translate a verbosity name into a numeric log level.

    Args:
        level: ``"QUIET"``, ``"NORMAL"``, ``"VERBOSE"`` or ``"DEBUG"``
            (case-insensitive).  ``None`` reads ``BRACKET_SIM_LOG_LEVEL``,
            then defaults to ``"NORMAL"``.

    Returns:
        The numeric level.

    Raises:
        ValueError: If the resolved name is not one of the four levels.
    """
    resolved = level if level is not None else os.environ.get(ENV_VAR, "NORMAL")
    try:
        return _LEVEL_MAP[resolved.upper()]
    except KeyError:
        msg = f"Unknown log level {resolved!r}. Valid levels: {', '.join(sorted(_LEVEL_MAP))}"
        raise ValueError(msg) from None


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Attach a single formatted handler to the ``bracket_sim`` root logger.

    Safe to call repeatedly; previous handlers are replaced rather than
    stacked.

    Args:
        level: Verbosity name, see :func:`resolve_level`.
        stream: Output stream for the handler.  Defaults to ``sys.stderr``
            so log lines never mix with rendered bracket output.

    Raises:
        ValueError: If *level* is not recognised.
    """
    numeric_level = resolve_level(level)

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(numeric_level)
    for existing in root.handlers[:]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)

    # Keep records out of the Python root logger.
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return ``bracket_sim.<name>``.

    Example:
        >>> get_logger("cli").name
        'bracket_sim.cli'
    """
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
