"""
dc_health/report.py — Rendering of check results and the report document.

Interactive runs print each rendered section as soon as its check finishes.
Report runs append the same sections to a temporary, timestamped document
which is printed once, in full, after the last check.
"""

from __future__ import annotations

import platform
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from dc_health import PRODUCT_NAME, __version__
from dc_health.health import RunResult

TEMPLATE_DIR = Path(__file__).parent / "templates"
RULE = "-" * 72
HEADER_RULE = "=" * 72


class ReportStorageError(RuntimeError):
    """Raised when the temporary report storage cannot be created."""


def build_jinja_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


_ENV = build_jinja_env()


def render(template_name: str, context: dict[str, Any]) -> str:
    return _ENV.get_template(template_name).render(**context)


def kernel_string() -> str:
    """Kernel identification, in the shape of `uname -srvm`."""
    u = platform.uname()
    return f"{u.system} {u.release} {u.version} {u.machine}"


def render_header(now: datetime) -> str:
    return render(
        "report_header.txt.j2",
        {
            "rule": HEADER_RULE,
            "product": PRODUCT_NAME,
            "version": __version__,
            "generated": now.strftime("%Y-%m-%d %H:%M"),
            "kernel": kernel_string(),
        },
    )


def render_section(result: RunResult) -> str:
    return render(
        "section.txt.j2",
        {
            "rule": RULE,
            "output": result.output.rstrip("\n"),
            "status": result.status,
            "name": result.name,
        },
    )


class ReportDocument:
    """Append-only report file living inside its own temporary directory.

    The directory, and the file with it, is removed when the context exits,
    whether the run finished, raised, or was interrupted.
    """

    def __init__(self, parent_dir: str | None = None, now: datetime | None = None) -> None:
        self.parent_dir = parent_dir or None
        self.started = now or datetime.now()
        self.path: Path | None = None
        self._tmpdir: tempfile.TemporaryDirectory | None = None

    def __enter__(self) -> ReportDocument:
        try:
            self._tmpdir = tempfile.TemporaryDirectory(prefix=f"{PRODUCT_NAME}-", dir=self.parent_dir)
            self.path = Path(self._tmpdir.name) / f"{PRODUCT_NAME}-report-{self.started:%Y%m%d-%H%M}.txt"
            self.path.touch()
        except OSError as e:
            if self._tmpdir is not None:
                self._tmpdir.cleanup()
            raise ReportStorageError(f"could not create report storage: {e}") from e
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._tmpdir is not None:
            self._tmpdir.cleanup()
            self._tmpdir = None

    def append(self, text: str) -> None:
        with open(self.path, "a", encoding="utf-8") as fh:
            fh.write(text)

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")
