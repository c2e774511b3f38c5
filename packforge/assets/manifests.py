"""Per-format text artifacts: desktop entry, metainfo, RPM spec, flatpak manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence

from ..errors import EmptyTemplateError, MissingRequiredFileError
from ..formats import TargetFormat
from ..schemas.config import AppConfig
from .layout import BuildTree
from .macros import Macro, MacroExpander
from .utils import read_normalized_text

FILE_LIST_PLACEHOLDER = "[FILE LIST]"

ContentReader = Callable[[Path], str]


def desktop_entry(target: TargetFormat, config: AppConfig, expander: MacroExpander) -> Optional[str]:
    """Expand the configured desktop entry lines; Linux formats only."""

    if not target.is_linux:
        return None
    return expander.expand("\n".join(config.desktop_entry))


def metainfo_document(
    target: TargetFormat,
    config: AppConfig,
    expander: MacroExpander,
    reader: ContentReader = read_normalized_text,
) -> Optional[str]:
    """Read and expand the metainfo template, if one is configured.

    A configured file that does not exist yields None unless ``assert_files``
    is set, in which case it raises MissingRequiredFileError.
    """

    path = config.metainfo_file
    if not target.is_linux or path is None:
        return None
    if not path.is_file():
        if config.assert_files:
            raise MissingRequiredFileError(path)
        return None

    content = reader(path)
    if not content:
        raise EmptyTemplateError(path)
    return expander.expand(content)


def rpm_spec(config: AppConfig, table: Mapping[str, str], files: Optional[Sequence[str]] = None) -> str:
    """Return the RPM spec header, description and file list.

    With ``files`` of None the file list is a placeholder token, for previews
    before the staged file list is known.
    """

    lines = [
        f"Name: {config.app_base_name}",
        f"Version: {table[Macro.APP_VERSION.value]}",
        f"Release: {table[Macro.PACKAGE_RELEASE.value]}",
        f"BuildArch: {table[Macro.BUILD_ARCH.value]}",
        f"Summary: {config.app_short_summary}",
        f"License: {config.app_license_id}",
        f"Vendor: {config.publisher_name}",
    ]
    if config.publisher_link_url:
        lines.append(f"Url: {config.publisher_link_url}")

    # Self-contained bundles carry their own dependencies.
    lines.append("AutoReqProv: no")

    # Description is mandatory; repeat the summary.
    lines.extend(["", "%description", config.app_short_summary, "", "%files"])
    header = "\n".join(lines) + "\n"

    if files is None:
        return header + FILE_LIST_PLACEHOLDER
    return header + "".join(_rooted(item) + "\n" for item in files if item)


def _rooted(item: str) -> str:
    return item if item.startswith("/") else "/" + item


def flatpak_manifest(config: AppConfig, tree: BuildTree) -> str:
    """Return the flatpak-builder manifest; it is written next to ``AppDir``."""

    options = config.flatpak
    lines: List[str] = [
        f"app-id: {config.app_id}",
        f"runtime: {options.platform_runtime}",
        f"runtime-version: '{options.platform_version}'",
        f"sdk: {options.platform_sdk}",
        f"command: {config.app_base_name}",
        "modules:",
        f"  - name: {config.app_id}",
        "    buildsystem: simple",
        "    build-commands:",
        "      - mkdir -p /app/bin",
        "      - cp -rn bin/* /app/bin",
        "      - mkdir -p /app/share",
        "      - cp -rn share/* /app/share",
        "    sources:",
        "      - type: dir",
        f"        path: {tree.bundle_source}",
    ]

    # An empty finish-args block is invalid, so omit the key entirely.
    if options.finish_args:
        lines.append("finish-args:")
        lines.extend(f"  - {item}" for item in options.finish_args)

    return "\n".join(lines)


def metainfo_template() -> str:
    """Return a starter AppStream metainfo template using build macros."""

    return _METAINFO_TEMPLATE.format(
        app_id=Macro.APP_ID.placeholder(),
        license=Macro.APP_LICENSE_ID.placeholder(),
        name=Macro.APP_FRIENDLY_NAME.placeholder(),
        summary=Macro.APP_SHORT_SUMMARY.placeholder(),
        vendor=Macro.PUBLISHER_NAME.placeholder(),
        url=Macro.PUBLISHER_LINK_URL.placeholder(),
        version=Macro.APP_VERSION.placeholder(),
        date=Macro.ISO_DATE.placeholder(),
        desktop_id=Macro.DESKTOP_ID.placeholder(),
    )


_METAINFO_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<component type="desktop">
    <id>{app_id}.desktop</id>
    <metadata_license>MIT</metadata_license>
    <project_license>{license}</project_license>
    <content_rating type="oars-1.1" />

    <name>{name}</name>
    <summary>{summary}</summary>
    <developer_name>{vendor}</developer_name>
    <url type="homepage">{url}</url>

    <description>
        <p>REPLACE THIS WITH YOUR OWN. This is a longer application description.
        IMPORTANT: In this file, you can use supported macros. See the macros command output for details.</p>
    </description>

    <releases>
        <release version="{version}" date="{date}">
            <description><p>The latest release.</p></description>
        </release>
    </releases>

    <!-- Needed for AppImage (use the DESKTOP_ID macro) -->
    <launchable type="desktop-id">{desktop_id}</launchable>
</component>
"""
