"""Macro symbol table and ``${NAME}`` template expansion."""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from ..errors import CyclicMacroError, UnresolvedMacroError
from ..formats import TargetFormat
from ..schemas.config import AppConfig
from .architecture import ResolvedArchitecture
from .layout import BuildTree

_PLACEHOLDER = re.compile(r"\$\{([^{}]*)\}")


class Macro(str, Enum):
    APP_BASE_NAME = "APP_BASE_NAME"
    APP_FRIENDLY_NAME = "APP_FRIENDLY_NAME"
    APP_ID = "APP_ID"
    APP_SHORT_SUMMARY = "APP_SHORT_SUMMARY"
    APP_LICENSE_ID = "APP_LICENSE_ID"
    APP_VERSION = "APP_VERSION"
    PACKAGE_RELEASE = "PACKAGE_RELEASE"
    PACKAGE_KIND = "PACKAGE_KIND"
    PUBLISHER_NAME = "PUBLISHER_NAME"
    PUBLISHER_LINK_URL = "PUBLISHER_LINK_URL"
    DESKTOP_ID = "DESKTOP_ID"
    DESKTOP_TERMINAL = "DESKTOP_TERMINAL"
    DESKTOP_EXEC = "DESKTOP_EXEC"
    BUILD_ARCH = "BUILD_ARCH"
    BUILD_TARGET = "BUILD_TARGET"
    BUILD_YEAR = "BUILD_YEAR"
    ISO_DATE = "ISO_DATE"
    INSTALL_BIN = "INSTALL_BIN"
    INSTALL_EXEC = "INSTALL_EXEC"

    def placeholder(self) -> str:
        return "${" + self.value + "}"


MACRO_DESCRIPTIONS: Mapping[Macro, str] = MappingProxyType(
    {
        Macro.APP_BASE_NAME: "Application executable base name",
        Macro.APP_FRIENDLY_NAME: "Human readable application name",
        Macro.APP_ID: "Reverse-DNS application identity",
        Macro.APP_SHORT_SUMMARY: "One line application summary",
        Macro.APP_LICENSE_ID: "SPDX license identifier",
        Macro.APP_VERSION: "Application version",
        Macro.PACKAGE_RELEASE: "Package release number",
        Macro.PACKAGE_KIND: "Target format being built, e.g. 'rpm'",
        Macro.PUBLISHER_NAME: "Publisher or vendor name",
        Macro.PUBLISHER_LINK_URL: "Publisher homepage (may be empty)",
        Macro.DESKTOP_ID: "Desktop file identity, i.e. '<app-id>.desktop'",
        Macro.DESKTOP_TERMINAL: "'true' when the application runs in a terminal",
        Macro.DESKTOP_EXEC: "Exec value for the desktop entry",
        Macro.BUILD_ARCH: "Package architecture token, e.g. 'amd64'",
        Macro.BUILD_TARGET: "Runtime identifier, e.g. 'linux-x64'",
        Macro.BUILD_YEAR: "Build year",
        Macro.ISO_DATE: "Build date as YYYY-MM-DD",
        Macro.INSTALL_BIN: "Installed location of the application binaries",
        Macro.INSTALL_EXEC: "Installed path of the main executable",
    }
)


def build_symbol_table(
    config: AppConfig,
    architecture: ResolvedArchitecture,
    tree: BuildTree,
    built_at: datetime,
) -> Mapping[str, str]:
    """Return the read-only macro table for one build.

    Some values reference other macros and are resolved at expansion time.
    """

    target = architecture.format
    if target.is_windows:
        install_exec = "${INSTALL_BIN}\\${APP_BASE_NAME}.exe"
    else:
        install_exec = "${INSTALL_BIN}/${APP_BASE_NAME}"

    if target in (TargetFormat.LINUX_PORTABLE_BUNDLE, TargetFormat.SANDBOXED_APP):
        desktop_exec = Macro.APP_BASE_NAME.placeholder()
    else:
        desktop_exec = Macro.INSTALL_EXEC.placeholder()

    values: Dict[Macro, str] = {
        Macro.APP_BASE_NAME: config.app_base_name,
        Macro.APP_FRIENDLY_NAME: config.friendly_name,
        Macro.APP_ID: config.app_id,
        Macro.APP_SHORT_SUMMARY: config.app_short_summary,
        Macro.APP_LICENSE_ID: config.app_license_id,
        Macro.APP_VERSION: config.app_version,
        Macro.PACKAGE_RELEASE: str(config.package_release),
        Macro.PACKAGE_KIND: target.value,
        Macro.PUBLISHER_NAME: config.publisher_name,
        Macro.PUBLISHER_LINK_URL: config.publisher_link_url or "",
        Macro.DESKTOP_ID: f"{config.app_id}.desktop",
        Macro.DESKTOP_TERMINAL: "true" if config.desktop_terminal else "false",
        Macro.DESKTOP_EXEC: desktop_exec,
        Macro.BUILD_ARCH: architecture.token,
        Macro.BUILD_TARGET: architecture.runtime_id,
        Macro.BUILD_YEAR: str(built_at.year),
        Macro.ISO_DATE: built_at.strftime("%Y-%m-%d"),
        Macro.INSTALL_BIN: tree.install_bin,
        Macro.INSTALL_EXEC: install_exec,
    }
    return MappingProxyType({macro.value: value for macro, value in values.items()})


def describe_macros(table: Mapping[str, str]) -> List[Dict[str, str]]:
    return [
        {"name": macro.value, "value": table.get(macro.value, ""), "description": MACRO_DESCRIPTIONS[macro]}
        for macro in Macro
    ]


class MacroExpander:
    """Expands ``${NAME}`` placeholders against a fixed symbol table."""

    def __init__(self, table: Mapping[str, str]) -> None:
        self.table = table

    def expand(self, text: str) -> str:
        """Return ``text`` with every placeholder fully resolved.

        Raises UnresolvedMacroError for unknown names and CyclicMacroError when a
        macro value refers back to a macro already being expanded.

        Substituted pieces can join into a new placeholder, so the output is
        rescanned until none remain. A name formed by joining in more than one
        rescan is cyclic.
        """

        result = self._expand(text, ())
        formed: Tuple[str, ...] = ()
        while True:
            names = tuple(dict.fromkeys(_PLACEHOLDER.findall(result)))
            if not names:
                return result
            for name in names:
                if name in formed:
                    raise CyclicMacroError(formed + (name,))
            formed += names
            result = self._expand(result, ())

    def resolve(self, name: str) -> str:
        return self._resolve(name, ())

    def _expand(self, text: str, expanding: Tuple[str, ...]) -> str:
        return _PLACEHOLDER.sub(lambda match: self._resolve(match.group(1), expanding), text)

    def _resolve(self, name: str, expanding: Tuple[str, ...]) -> str:
        if name in expanding:
            raise CyclicMacroError(expanding + (name,))
        if name not in self.table:
            raise UnresolvedMacroError(name)
        return self._expand(self.table[name], expanding + (name,))
