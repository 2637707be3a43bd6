"""
dc_health/health/services.py — Samba AD DC service state check.

Asks the service manager whether the unit is active, failed and enabled,
then appends the full status dump so the operator sees the journal tail.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dc_health.health import ProbeResult, run_command

if TYPE_CHECKING:
    from dc_health.settings import Settings


def is_samba_service_running(cfg: Settings) -> ProbeResult:
    unit = cfg.SAMBA_SERVICE
    active_rc, active_out = run_command([cfg.SYSTEMCTL, "is-active", unit], cfg)
    failed_rc, failed_out = run_command([cfg.SYSTEMCTL, "is-failed", unit], cfg)
    enabled_rc, enabled_out = run_command([cfg.SYSTEMCTL, "is-enabled", unit], cfg)
    # `systemctl status` exits non-zero for stopped units; only its text matters
    _, status_out = run_command([cfg.SYSTEMCTL, "status", "--no-pager", unit], cfg)

    lines = [
        f"is-active:  {active_out.strip() or active_rc}",
        f"is-failed:  {failed_out.strip() or failed_rc}",
        f"is-enabled: {enabled_out.strip() or enabled_rc}",
        "",
        status_out.rstrip(),
        "",
    ]
    output = "\n".join(lines)

    # is-failed exits 0 when the unit IS in the failed state
    if failed_rc == 0 or active_rc != 0:
        return ProbeResult(1, output + f"{unit} is not running\n")
    if enabled_rc != 0:
        return ProbeResult(2, output + f"{unit} is running but not enabled at boot\n")
    return ProbeResult(0, output)
