"""
dc_health/runner.py — Executes registered checks and folds their outcomes.

Checks run one at a time in registry order. Each mode has its own handler;
the handler is chosen once, up front, by dispatch().

Importable (used by tests):
    from dc_health.runner import dispatch, execute, fold
    exit_code = dispatch(Mode.RUN, registry, None, cfg)
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from enum import IntEnum
from typing import TYPE_CHECKING, TextIO

from dc_health.health import Outcome, RunResult
from dc_health.registry import CheckDescriptor, Mode, Registry, eligible
from dc_health.report import ReportDocument, render_header, render_section

if TYPE_CHECKING:
    from dc_health.settings import Settings


class AggregateStatus(IntEnum):
    OK = 0
    DEGRADED = 1


def fold(status: AggregateStatus, outcome: Outcome) -> AggregateStatus:
    """Degrade on any non-success outcome; never upgrade back."""
    if status is AggregateStatus.DEGRADED or outcome is not Outcome.SUCCESS:
        return AggregateStatus.DEGRADED
    return AggregateStatus.OK


def execute(check: CheckDescriptor, cfg: Settings) -> RunResult:
    """Run one probe. Any exception it raises becomes a FAILURE result."""
    try:
        probe_result = check.probe(cfg)
    except Exception as e:  # noqa: BLE001
        return RunResult(check.name, Outcome.FAILURE, f"error: {e}\n")
    return RunResult(check.name, Outcome.from_code(probe_result.code), probe_result.output)


def run_checks(
    registry: Registry,
    requested: frozenset[str] | None,
    mode: Mode,
    cfg: Settings,
    emit: Callable[[RunResult], None],
) -> AggregateStatus:
    """Visit every registered check in order, executing the eligible ones."""
    status = AggregateStatus.OK
    for check in registry:
        if not eligible(check.name, requested, mode):
            continue
        result = execute(check, cfg)
        emit(result)
        status = fold(status, result.outcome)
    return status


# ---------------------------------------------------------------------------
# Mode handlers
# ---------------------------------------------------------------------------


def handle_list(
    registry: Registry, requested: frozenset[str] | None, cfg: Settings, out: TextIO
) -> int:
    for check in registry:
        if eligible(check.name, requested, Mode.LIST):
            print(check.name, file=out)
    return 0


def handle_run(registry: Registry, requested: frozenset[str] | None, cfg: Settings, out: TextIO) -> int:
    def emit(result: RunResult) -> None:
        out.write(render_section(result))
        out.flush()

    return int(run_checks(registry, requested, Mode.RUN, cfg, emit))


def handle_report(
    registry: Registry, requested: frozenset[str] | None, cfg: Settings, out: TextIO
) -> int:
    if requested:
        print(
            "NOTE: report mode always runs every check; "
            f"ignoring requested names: {' '.join(sorted(requested))}",
            file=sys.stderr,
        )
    with ReportDocument(cfg.REPORT_DIR) as document:
        document.append(render_header(document.started))

        def emit(result: RunResult) -> None:
            document.append(render_section(result))

        status = run_checks(registry, requested, Mode.REPORT, cfg, emit)
        out.write(document.read())
        out.flush()
    return int(status)


Handler = Callable[[Registry, "frozenset[str] | None", "Settings", TextIO], int]

HANDLERS: dict[Mode, Handler] = {
    Mode.LIST: handle_list,
    Mode.RUN: handle_run,
    Mode.REPORT: handle_report,
}


def dispatch(
    mode: Mode,
    registry: Registry,
    requested: Iterable[str] | None,
    cfg: Settings,
    out: TextIO | None = None,
) -> int:
    """Run the handler for `mode` and return the process exit code."""
    names = frozenset(requested) if requested else None
    return HANDLERS[mode](registry, names, cfg, out or sys.stdout)
