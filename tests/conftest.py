"""Pytest configuration for the larakeys test suite.

Hypothesis profiles:
- dev: 300 examples, the default for local runs
- ci: 50 derandomized examples, selected when CI=true
- verbose: 100 examples with per-example output

HYPOTHESIS_PROFILE overrides the automatic choice.

Whole-file parser round trips are marked ``fuzz`` and only run with
``pytest -m fuzz``.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import HealthCheck, Verbosity, settings

# Generated PHP sources are regex-heavy; large examples may be slow to build.
_SLOW_DATA = [HealthCheck.too_slow]

settings.register_profile("dev", max_examples=300, suppress_health_check=_SLOW_DATA)
settings.register_profile(
    "ci",
    max_examples=50,
    derandomize=True,
    print_blob=True,
    suppress_health_check=_SLOW_DATA,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    verbosity=Verbosity.verbose,
    suppress_health_check=_SLOW_DATA,
)

_PROFILES = ("dev", "ci", "verbose")


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "fuzz: long-running parser round trips (run with -m fuzz)"
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the marker expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="parser round trip; run with: pytest -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a UTF-8 file below tmp_path, creating parent directories."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
