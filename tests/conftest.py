from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from packforge.schemas.config import AppConfig


def make_config(**overrides: Any) -> AppConfig:
    payload: dict[str, Any] = {
        "app_base_name": "HelloWorld",
        "app_id": "net.example.helloworld",
        "app_friendly_name": "Hello World",
        "app_short_summary": "A HelloWorld application",
        "app_license_id": "MIT",
        "app_version": "1.2.3",
        "package_release": 2,
        "publisher_name": "Example Ltd",
        "publisher_link_url": "https://example.net",
        "desktop_entry": [
            "[Desktop Entry]",
            "Type=Application",
            "Name=${APP_FRIENDLY_NAME}",
            "Exec=${DESKTOP_EXEC}",
            "Terminal=${DESKTOP_TERMINAL}",
        ],
    }
    payload.update(overrides)
    return AppConfig.model_validate(payload)


@pytest.fixture
def app_config() -> AppConfig:
    return make_config()


@pytest.fixture
def icon_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "icons"
    directory.mkdir()
    for name in ("app.svg", "app.ico", "app.16x16.png", "app.32.png", "app.256x256.png"):
        (directory / name).write_bytes(b"icon:" + name.encode("utf-8"))
    return directory
