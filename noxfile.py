"""Nox sessions for the bracket_sim quality pipeline.

Running ``nox`` executes Ruff (lint/format) -> Mypy (type check) -> Pytest (tests).
Individual sessions can be invoked with ``nox -s <session>``; ``nox -s smoke``
runs only the ``smoke``-marked tests.
"""

from __future__ import annotations

import nox

nox.options.sessions = ["lint", "typecheck", "tests"]


@nox.session(python=False)
def lint(session: nox.Session) -> None:
    """Run Ruff linting with auto-fix and format checking."""
    session.run("ruff", "check", ".", "--fix")
    session.run("ruff", "format", "--check", ".")


@nox.session(python=False)
def typecheck(session: nox.Session) -> None:
    """Run mypy strict type checking on the package and tests."""
    session.run("mypy", "--strict", "--show-error-codes", "--namespace-packages", "src/bracket_sim", "tests")


@nox.session(python=False)
def tests(session: nox.Session) -> None:
    """Run the full pytest suite, statistical tests included."""
    session.run("pytest", "--tb=short", *session.posargs)


@nox.session(python=False)
def smoke(session: nox.Session) -> None:
    """Run the fast structural checks only."""
    session.run("pytest", "-m", "smoke", "--tb=short")
