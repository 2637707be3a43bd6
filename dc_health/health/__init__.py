"""
dc_health/health — Domain-controller health probes.

Each check module exposes probe functions taking Settings and returning a
ProbeResult (an integer code plus the captured text). The runner maps the
code onto an Outcome and folds it into the aggregate status.

Usage:
    from dc_health.health import Outcome, ProbeResult, test_status
    from dc_health.health.timesync import is_time_synchronized
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dc_health.settings import Settings

# Exit code reported when a command could not be started at all
COMMAND_NOT_RUN = 127


def test_status(code: int) -> str:
    """Map a probe's returned integer onto its human-readable label."""
    if code == 0:
        return "DONE"
    if code == 2:
        return "WARN"
    return "FAIL"


# Not a pytest test function, even though it lives in an importable module
test_status.__test__ = False  # type: ignore[attr-defined]


class Outcome(IntEnum):
    SUCCESS = 0
    FAILURE = 1
    WARNING = 2

    @classmethod
    def from_code(cls, code: int) -> Outcome:
        if code == 0:
            return cls.SUCCESS
        if code == 2:
            return cls.WARNING
        return cls.FAILURE

    @property
    def label(self) -> str:
        return test_status(self.value)


@dataclass(frozen=True)
class ProbeResult:
    code: int
    output: str = ""


@dataclass(frozen=True)
class RunResult:
    name: str
    outcome: Outcome
    output: str

    @property
    def status(self) -> str:
        return self.outcome.label

    def __str__(self) -> str:
        return f"[{self.status}] {self.name}"


def run_command(args: list[str], cfg: Settings) -> tuple[int, str]:
    """Run one host command, returning (returncode, stdout+stderr).

    Never raises for a missing binary or a timeout; both come back as a
    non-zero code with an explanatory line appended to the text. Bytes that
    do not decode are replaced rather than discarding the output.
    """
    try:
        result = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            timeout=cfg.command_timeout,
        )
        return result.returncode, result.stdout or ""
    except subprocess.TimeoutExpired as e:
        partial = e.output if isinstance(e.output, str) else (e.output or b"").decode(errors="replace")
        return 1, f"{partial}timed out ({cfg.CHECK_TIMEOUT_SECONDS}s): {' '.join(args)}\n"
    except OSError as e:
        return COMMAND_NOT_RUN, f"error: could not run {args[0]}: {e}\n"
