"""Nox configuration for linting and tests.

See https://nox.thea.codes/en/stable/usage.html for information about using the
nox command line, and https://nox.thea.codes/en/stable/config.html for the nox
API reference.

All sessions work either directly in a development environment (i.e. with nox's
--no-venv option) or in a nox-managed virtualenv.
"""

from pathlib import Path

import nox
from nox import session as session

nox.options.default_venv_backend = "uv|virtualenv"

CWD = Path(".").resolve()

PACKAGE_NAME = "tmlt.prng"
"""Name of the package."""
PACKAGE_SOURCE_DIR = "src/tmlt/prng"
"""Relative path from the project root to its source code."""

SMOKETEST_SCRIPT = """
from tmlt.prng import Random
assert Random(1).next_int() == 384748
"""
"""Python script to run as a quick self-test."""

MIN_COVERAGE = 75
"""For test suites where we track coverage (i.e. the fast tests and the full
test suite), fail if test coverage falls below this percentage."""

PYTHON_VERSIONS = ["3.9", "3.10", "3.11", "3.12"]


def _install(session, *groups: str):
    """Install the package with the given optional dependency groups."""
    extras = ",".join(groups)
    session.install("-e", f".[{extras}]" if extras else ".")


def _pytest(session, *args: str):
    """Run pytest with coverage over the package sources."""
    session.run(
        "pytest",
        f"--cov={PACKAGE_SOURCE_DIR}",
        f"--cov-fail-under={MIN_COVERAGE}",
        "--cov-report=term",
        *args,
        *session.posargs,
    )


@session(python=PYTHON_VERSIONS)
def test(session):
    """Run all tests."""
    _install(session, "test")
    session.install("pytest-cov")
    _pytest(session, "test")


@session
def test_fast(session):
    """Run tests without the slow statistical tests."""
    _install(session, "test")
    session.install("pytest-cov")
    _pytest(session, "-m", "not slow", "test")


@session
def test_slow(session):
    """Run only the slow statistical tests."""
    _install(session, "test")
    session.run("pytest", "-m", "slow", "test", *session.posargs)


@session
def test_doctest(session):
    """Run the examples in docstrings."""
    _install(session, "test")
    session.run("pytest", "--doctest-modules", "src", *session.posargs)


@session
def smoketest(session):
    """Check that the package imports and produces its documented first draw."""
    _install(session)
    session.run("python", "-c", SMOKETEST_SCRIPT)


@session
def black(session):
    """Check code formatting with black."""
    session.install("black")
    session.run("black", "--check", "--diff", "src", "test", "benchmark", "noxfile.py")


@session
def isort(session):
    """Check import ordering with isort."""
    session.install("isort")
    session.run("isort", "--check-only", "--diff", "src", "test", "benchmark")


@session
def mypy(session):
    """Type-check the package with mypy."""
    _install(session, "test", "dev")
    session.run("mypy", "-p", PACKAGE_NAME)


@session
def pylint(session):
    """Lint the package and tests with pylint."""
    _install(session, "test", "dev")
    session.run("pylint", "--score=no", PACKAGE_SOURCE_DIR, "test")


@session
def benchmark(session):
    """Time the generator's hot paths."""
    _install(session)
    session.run("python", "benchmark/benchmarking_prng.py")
