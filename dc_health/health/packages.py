"""
dc_health/health/packages.py — Samba package presence check.

Queries the host package database (dpkg or rpm) for the Samba package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dc_health.health import ProbeResult, run_command

if TYPE_CHECKING:
    from dc_health.settings import Settings


def package_query_args(cfg: Settings) -> list[str]:
    if cfg.PACKAGE_MANAGER == "rpm":
        return ["rpm", "-q", cfg.SAMBA_PACKAGE]
    return ["dpkg", "-s", cfg.SAMBA_PACKAGE]


def is_samba_installed(cfg: Settings) -> ProbeResult:
    code, output = run_command(package_query_args(cfg), cfg)
    if code == 0:
        return ProbeResult(0, output)
    return ProbeResult(1, output + f"package '{cfg.SAMBA_PACKAGE}' is not installed\n")
