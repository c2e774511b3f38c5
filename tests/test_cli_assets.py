from __future__ import annotations

import json
from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path

import yaml

from packforge.cli import assets as assets_cli


def _run_cli(argv: list[str]) -> tuple[int, str]:
    buffer = StringIO()
    with redirect_stdout(buffer):
        code = assets_cli.main(argv)
    return code, buffer.getvalue()


def _write_config(tmp_path: Path, **overrides: object) -> Path:
    icons = tmp_path / "icons"
    icons.mkdir(exist_ok=True)
    (icons / "app.svg").write_text("<svg/>", encoding="utf-8")
    (icons / "app.48.png").write_bytes(b"png")
    payload = {
        "app_base_name": "HelloWorld",
        "app_id": "net.example.helloworld",
        "app_short_summary": "Says hello",
        "app_license_id": "MIT",
        "publisher_name": "Example Ltd",
        "desktop_entry": ["[Desktop Entry]", "Name=${APP_FRIENDLY_NAME}", "Exec=${DESKTOP_EXEC}"],
        "icons": ["icons/app.svg", "icons/app.48.png"],
    }
    payload.update(overrides)
    path = tmp_path / "app.yml"
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    return path


def test_cli_assets_command_writes_files(tmp_path: Path) -> None:
    config = _write_config(tmp_path)
    code, output = _run_cli(
        [
            "assets",
            "--config",
            str(config),
            "--target",
            "deb",
            "--runtime",
            "linux-arm64",
            "--workspace-root",
            str(tmp_path),
            "--write",
        ]
    )
    assert code == 0
    payload = json.loads(output)
    assert payload["target"] == "deb"
    assert payload["architecture"]["token"] == "arm64"
    assert "Exec=/opt/net.example.helloworld/HelloWorld" in payload["desktop_entry"]

    desktop = tmp_path / "deploy" / "net.example.helloworld-deb" / "AppDir" / "usr" / "share" / "applications"
    assert (desktop / "net.example.helloworld.desktop").exists()
    assert len(payload["written"]) == 3


def test_cli_rpm_spec_command(tmp_path: Path) -> None:
    config = _write_config(tmp_path)
    code, output = _run_cli(
        [
            "rpm-spec",
            "--config",
            str(config),
            "--runtime",
            "linux-x64",
            "--file",
            "opt/net.example.helloworld/HelloWorld",
        ]
    )
    assert code == 0
    assert "BuildArch: x86_64" in output
    assert output.endswith("%files\n/opt/net.example.helloworld/HelloWorld\n")


def test_cli_macros_command(tmp_path: Path) -> None:
    config = _write_config(tmp_path)
    code, output = _run_cli(["macros", "--config", str(config), "--target", "flatpak", "--runtime", "linux-x64"])
    assert code == 0
    macros = {entry["name"]: entry["value"] for entry in json.loads(output)["macros"]}
    assert macros["APP_ID"] == "net.example.helloworld"
    assert macros["INSTALL_BIN"] == "/app/bin"


def test_cli_reports_packaging_errors(tmp_path: Path) -> None:
    config = _write_config(tmp_path, desktop_entry=["Name=${UNKNOWN}"])
    code, output = _run_cli(["assets", "--config", str(config), "--target", "rpm", "--runtime", "linux-x64"])
    assert code == 1
    payload = json.loads(output)
    assert payload["error"] == "UnresolvedMacroError"
    assert "UNKNOWN" in payload["message"]


def test_cli_metainfo_template() -> None:
    code, output = _run_cli(["metainfo-template"])
    assert code == 0
    assert output.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "${APP_ID}" in output
