"""
tests/conftest.py — Shared fixtures and path setup for all tests.

Adds the project root to sys.path so unit tests can import dc_health
without installing it:
    from dc_health.registry import Registry
    from dc_health.settings import Settings
"""
import pathlib
import sys

import pytest

# Make project root importable without installing as a package
PROJECT_ROOT = pathlib.Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dc_health.health import ProbeResult  # noqa: E402
from dc_health.registry import Registry  # noqa: E402
from dc_health.settings import Settings  # noqa: E402


@pytest.fixture
def cfg(tmp_path) -> Settings:
    return Settings(REPORT_DIR=str(tmp_path))


@pytest.fixture
def probe_calls() -> list[str]:
    """Names of fake probes in the order they were invoked."""
    return []


@pytest.fixture
def make_probe(probe_calls):
    """Factory for probes returning a constant result and recording the call."""

    def factory(name: str, code: int, output: str = ""):
        def probe(cfg: Settings) -> ProbeResult:  # noqa: ARG001
            probe_calls.append(name)
            return ProbeResult(code, output)

        return probe

    return factory


@pytest.fixture
def abc_registry(make_probe) -> Registry:
    """A succeeds, B warns, C fails."""
    registry = Registry()
    registry.register("A", make_probe("A", 0, "a says hello\n"))
    registry.register("B", make_probe("B", 2, "b is uneasy\n"))
    registry.register("C", make_probe("C", 1, "c is broken\n"))
    return registry
