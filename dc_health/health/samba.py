"""
dc_health/health/samba.py — Directory database checks via samba-tool.

Both probes report samba-tool's exit code as-is (0 healthy, anything else
is a failure) together with its full output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dc_health.health import ProbeResult, run_command

if TYPE_CHECKING:
    from dc_health.settings import Settings


def is_domain_info_available(cfg: Settings) -> ProbeResult:
    code, output = run_command([cfg.SAMBA_TOOL, "domain", "info", cfg.DC_ADDRESS], cfg)
    return ProbeResult(0 if code == 0 else 1, output)


def is_database_consistent(cfg: Settings) -> ProbeResult:
    code, output = run_command([cfg.SAMBA_TOOL, "dbcheck", "--cross-ncs"], cfg)
    return ProbeResult(0 if code == 0 else 1, output)
