"""
dc_health/registry.py — Ordered registry of named checks and the selector
that decides which of them a run is allowed to execute.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from dc_health.health import ProbeResult, dns, packages, samba, services, timesync

if TYPE_CHECKING:
    from dc_health.settings import Settings

Probe = Callable[["Settings"], ProbeResult]


class Mode(Enum):
    LIST = "list"
    RUN = "run"
    REPORT = "report"


class DuplicateCheckError(ValueError):
    """Raised when two checks are registered under the same name."""


@dataclass(frozen=True)
class CheckDescriptor:
    name: str
    probe: Probe


class Registry:
    def __init__(self) -> None:
        self._checks: list[CheckDescriptor] = []

    def register(self, name: str, probe: Probe) -> CheckDescriptor:
        if any(c.name == name for c in self._checks):
            raise DuplicateCheckError(f"check '{name}' is already registered")
        descriptor = CheckDescriptor(name, probe)
        self._checks.append(descriptor)
        return descriptor

    def names(self) -> list[str]:
        return [c.name for c in self._checks]

    def __iter__(self) -> Iterator[CheckDescriptor]:
        return iter(self._checks)

    def __len__(self) -> int:
        return len(self._checks)


def eligible(name: str, requested: frozenset[str] | None, mode: Mode) -> bool:
    """Return True if the named check may run under this mode and filter.

    List and run modes match requested names exactly. Report mode always
    produces a complete report, so any requested filter is ignored there.
    """
    if mode is Mode.REPORT or not requested:
        return True
    return name in requested


def default_registry() -> Registry:
    """The built-in domain-controller checks, in execution order."""
    registry = Registry()
    registry.register("is_samba_installed", packages.is_samba_installed)
    registry.register("is_samba_service_running", services.is_samba_service_running)
    registry.register("is_domain_info_available", samba.is_domain_info_available)
    registry.register("is_database_consistent", samba.is_database_consistent)
    registry.register("is_hostname_correct", dns.is_hostname_correct)
    registry.register("is_time_synchronized", timesync.is_time_synchronized)
    return registry
