"""
dc_health/health/timesync.py — Clock synchronisation check.

Kerberos rejects tickets when clocks drift, so NTP must be both enabled and
synchronised. Enabled-but-not-yet-synchronised is a warning.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dc_health.health import ProbeResult, run_command

if TYPE_CHECKING:
    from dc_health.settings import Settings


def _show(cfg: Settings, prop: str) -> tuple[int, str]:
    code, output = run_command([cfg.TIMEDATECTL, "show", "-p", prop, "--value"], cfg)
    return code, output.strip()


def is_time_synchronized(cfg: Settings) -> ProbeResult:
    ntp_rc, ntp = _show(cfg, "NTP")
    sync_rc, synced = _show(cfg, "NTPSynchronized")
    _, status_out = run_command([cfg.TIMEDATECTL, "status"], cfg)

    output = f"NTP: {ntp or ntp_rc}\nNTPSynchronized: {synced or sync_rc}\n\n{status_out}"
    if ntp_rc != 0 or ntp != "yes":
        return ProbeResult(1, output + "NTP service is not active\n")
    if sync_rc != 0 or synced != "yes":
        return ProbeResult(2, output + "NTP is active but the clock is not synchronised yet\n")
    return ProbeResult(0, output)
