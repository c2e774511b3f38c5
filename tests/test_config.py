from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from packforge.schemas.config import AppConfig, load_config


def test_load_yaml_config_resolves_relative_paths(tmp_path: Path) -> None:
    path = tmp_path / "app.yml"
    path.write_text(
        yaml.safe_dump(
            {
                "app_base_name": " HelloWorld ",
                "app_id": "net.example.helloworld",
                "icons": ["icons/app.svg"],
                "metainfo_file": "app.metainfo.xml",
                "flatpak": {"finish_args": ["--share=network"]},
            }
        ),
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.app_base_name == "HelloWorld"
    assert config.icons == (tmp_path / "icons" / "app.svg",)
    assert config.metainfo_file == tmp_path / "app.metainfo.xml"
    assert config.flatpak.finish_args == ("--share=network",)
    assert config.friendly_name == "HelloWorld"


def test_load_json_config(tmp_path: Path) -> None:
    path = tmp_path / "app.json"
    path.write_text(json.dumps({"app_base_name": "Hello", "app_id": "a.b.c", "package_release": 3}), encoding="utf-8")
    config = load_config(path)
    assert config.package_release == 3
    assert config.flatpak.platform_runtime == "org.freedesktop.Platform"


def test_config_is_frozen() -> None:
    config = AppConfig(app_base_name="Hello", app_id="a.b.c")
    with pytest.raises(ValidationError):
        config.app_id = "changed"  # type: ignore[misc]


def test_config_rejects_unknown_and_blank_fields() -> None:
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"app_base_name": "Hello", "app_id": "a.b.c", "surprise": True})
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"app_base_name": "  ", "app_id": "a.b.c"})


def test_load_config_requires_mapping(tmp_path: Path) -> None:
    path = tmp_path / "app.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(path)


def test_desktop_entry_and_finish_args_are_not_stripped() -> None:
    config = AppConfig.model_validate(
        {
            "app_base_name": "Hello",
            "app_id": " a.b.c ",
            "desktop_entry": ["Comment=trailing  ", "  Keywords=indented"],
            "flatpak": {"finish_args": [" --share=network "], "platform_version": " 23.08 "},
        }
    )
    assert config.app_id == "a.b.c"
    assert config.desktop_entry == ("Comment=trailing  ", "  Keywords=indented")
    assert config.flatpak.finish_args == (" --share=network ",)
    assert config.flatpak.platform_version == "23.08"
