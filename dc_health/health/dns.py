"""
dc_health/health/dns.py — Local hostname resolution check.

A domain controller must carry a fully-qualified hostname that resolves
through the configured name servers.
"""

from __future__ import annotations

import socket
from typing import TYPE_CHECKING

from dc_health.health import ProbeResult, run_command

if TYPE_CHECKING:
    from dc_health.settings import Settings


def local_fqdn() -> str:
    return socket.getfqdn()


def is_hostname_correct(cfg: Settings) -> ProbeResult:
    fqdn = local_fqdn()
    header = f"hostname: {fqdn}\n"
    if "." not in fqdn:
        return ProbeResult(1, header + "hostname is not fully qualified (no domain part)\n")

    code, output = run_command([cfg.HOST_TOOL, fqdn], cfg)
    if code != 0:
        return ProbeResult(1, header + output + f"could not resolve {fqdn}\n")
    return ProbeResult(0, header + output)
