"""
dc_health/settings.py — Configuration contract for dc-health.

Uses pydantic-settings to load, validate, and type-check the environment
variables that locate the host tooling each check shells out to.

Two usage modes:
  Production / CLI:
      cfg = load_settings()                      # reads .env + os.environ
      cfg = load_settings("/etc/dc-health.env")  # override env file path

  Tests (isolated — no env file, no os.environ bleed):
      cfg = Settings(SAMBA_TOOL="/opt/samba/bin/samba-tool")
"""
from __future__ import annotations

import os
import re
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class Settings(BaseSettings):
    # Settings() reads purely from kwargs. load_settings() is the explicit
    # entry point that merges the env file with os.environ.
    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)

    # -------------------------------------------------------------------------
    # Host tooling
    # -------------------------------------------------------------------------
    SAMBA_TOOL: str = "samba-tool"
    SYSTEMCTL: str = "systemctl"
    TIMEDATECTL: str = "timedatectl"
    HOST_TOOL: str = "host"
    PACKAGE_MANAGER: Literal["dpkg", "rpm"] = "dpkg"

    # -------------------------------------------------------------------------
    # Directory service
    # -------------------------------------------------------------------------
    SAMBA_SERVICE: str = "samba-ad-dc"
    SAMBA_PACKAGE: str = "samba"
    DC_ADDRESS: str = "127.0.0.1"

    # -------------------------------------------------------------------------
    # Run behaviour
    # -------------------------------------------------------------------------
    CHECK_TIMEOUT_SECONDS: int = 0
    REPORT_DIR: Optional[str] = None

    @property
    def command_timeout(self) -> float | None:
        """Timeout handed to subprocess.run; None when timeouts are disabled."""
        return self.CHECK_TIMEOUT_SECONDS or None

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------

    @field_validator("PACKAGE_MANAGER", "SAMBA_SERVICE", "SAMBA_PACKAGE", "DC_ADDRESS", mode="before")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    @field_validator("CHECK_TIMEOUT_SECONDS")
    @classmethod
    def non_negative_timeout(cls, v: int) -> int:
        if v < 0:
            raise ValueError("CHECK_TIMEOUT_SECONDS must be >= 0 (0 disables the timeout)")
        return v


def load_settings(env_file: str = ".env") -> Settings:
    """Load and validate settings from an env file + os.environ.

    os.environ takes precedence over env file values. A missing env file is
    not an error; defaults apply.

    Raises:
        ValidationError: if any value is invalid.
    """
    file_vals: dict[str, str] = {}
    try:
        with open(env_file, encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                k, _, v = line.partition("=")
                k = k.strip()
                # Strip inline comments: "dpkg   # dpkg | rpm" → "dpkg"
                v = re.sub(r"\s+#.*$", "", v.strip())
                if k:
                    file_vals[k] = v
    except FileNotFoundError:
        pass
    merged = {**file_vals, **os.environ}
    known = {k: v for k, v in merged.items() if k in Settings.model_fields}
    return Settings(**known)
