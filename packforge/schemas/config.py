"""Pydantic models describing the application configuration snapshot."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class FlatpakOptions(BaseModel):
    platform_runtime: str = Field(default="org.freedesktop.Platform", min_length=1)
    platform_sdk: str = Field(default="org.freedesktop.Sdk", min_length=1)
    platform_version: str = Field(default="22.08", min_length=1)
    finish_args: Tuple[str, ...] = Field(
        default=(),
        description="Sandbox permission entries, e.g. '--share=network'.",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("platform_runtime", "platform_sdk", "platform_version", mode="before")
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value


class AppConfig(BaseModel):
    """Read-only configuration for one asset build."""

    app_base_name: str = Field(..., min_length=1, description="Executable base name.")
    app_id: str = Field(..., min_length=1, description="Reverse-DNS application identity.")
    app_friendly_name: Optional[str] = None
    app_short_summary: str = ""
    app_license_id: str = ""
    app_version: str = Field(default="1.0.0", min_length=1)
    package_release: int = Field(default=1, ge=0)
    publisher_name: str = ""
    publisher_link_url: Optional[str] = None
    desktop_terminal: bool = False
    desktop_entry: Tuple[str, ...] = Field(
        default=(),
        description="Desktop entry lines, emitted in the given order.",
    )
    icons: Tuple[Path, ...] = ()
    metainfo_file: Optional[Path] = None
    assert_files: bool = Field(
        default=False,
        description="Fail when a configured file does not exist.",
    )
    flatpak: FlatpakOptions = Field(default_factory=FlatpakOptions)

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Desktop entry lines and finish args are passed through untouched.
    @field_validator(
        "app_base_name",
        "app_id",
        "app_friendly_name",
        "app_short_summary",
        "app_license_id",
        "app_version",
        "publisher_name",
        "publisher_link_url",
        mode="before",
    )
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value

    @property
    def friendly_name(self) -> str:
        return self.app_friendly_name or self.app_base_name


def load_config(path: Path) -> AppConfig:
    """Load configuration from a JSON or YAML file.

    Relative icon and metainfo paths are resolved against the file's directory.
    """

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        payload = json.loads(text)
    else:
        payload = yaml.safe_load(text) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Configuration at {path} must be a mapping")

    base = path.parent
    if payload.get("icons"):
        payload["icons"] = [_resolve(base, item) for item in payload["icons"]]
    if payload.get("metainfo_file"):
        payload["metainfo_file"] = _resolve(base, payload["metainfo_file"])
    return AppConfig.model_validate(payload)


def _resolve(base: Path, value: str) -> Path:
    candidate = Path(value)
    if not candidate.is_absolute():
        candidate = base / candidate
    return candidate
