"""Runtime identifier to package architecture conversion."""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass
from typing import Optional

from ..formats import TargetFormat

logger = logging.getLogger(__name__)

# Suffix order matters: "-arm64" must be tested before "-arm".
_RUNTIME_SUFFIXES = (
    ("-x64", "x64"),
    ("-arm64", "arm64"),
    ("-arm", "arm"),
    ("-x86", "x86"),
)

_MACHINE_ARCH = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
    "arm": "arm",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
}

_DEB_TOKENS = {"x64": "amd64", "arm64": "arm64", "x86": "x32"}
_RPM_TOKENS = {"x64": "x86_64", "arm64": "aarch64", "x86": "i686"}
_POSIX_TOKENS = {"x64": "x86_64", "arm64": "aarch64"}


@dataclass(frozen=True, slots=True)
class HostInfo:
    """Host operating system and architecture, detected once per process."""

    simple_os: str
    arch: str

    @property
    def default_runtime(self) -> str:
        if self.simple_os == "Windows":
            return "win-arm64" if self.arch == "arm64" else "win-x64"
        if self.simple_os == "OSX":
            return "osx-x64"
        return "linux-arm64" if self.arch == "arm64" else "linux-x64"


def detect_host(system: Optional[str] = None, machine: Optional[str] = None) -> HostInfo:
    """Return host information from the running interpreter (or the given values)."""

    system_name = (system if system is not None else platform.system()).lower()
    machine_name = (machine if machine is not None else platform.machine()).lower()

    if system_name.startswith("win"):
        simple_os = "Windows"
    elif system_name == "darwin":
        simple_os = "OSX"
    else:
        simple_os = "Linux"
    return HostInfo(simple_os=simple_os, arch=_MACHINE_ARCH.get(machine_name, "x64"))


@dataclass(frozen=True, slots=True)
class ResolvedArchitecture:
    format: TargetFormat
    runtime_id: str
    arch: str
    token: str
    is_windows_runtime: bool
    is_uncertain: bool

    def __str__(self) -> str:
        return self.token


class ArchitectureResolver:
    """Maps a runtime identifier such as ``linux-arm64`` to a per-format token."""

    def __init__(self, host: HostInfo) -> None:
        self.host = host

    def resolve(
        self,
        target: TargetFormat,
        runtime: Optional[str] = None,
        override: Optional[str] = None,
    ) -> ResolvedArchitecture:
        runtime_id = (runtime or "").strip().lower() or self.host.default_runtime

        arch = next(
            (name for suffix, name in _RUNTIME_SUFFIXES if runtime_id.endswith(suffix)),
            None,
        )
        uncertain = arch is None
        if arch is None:
            arch = self.host.arch
            logger.warning(
                "Architecture of runtime '%s' is uncertain; assuming host architecture '%s'",
                runtime_id,
                arch,
            )

        if override and override.strip():
            token = override.strip()
        else:
            token = _format_token(target, arch)

        return ResolvedArchitecture(
            format=target,
            runtime_id=runtime_id,
            arch=arch,
            token=token,
            is_windows_runtime=runtime_id.startswith("win"),
            is_uncertain=uncertain,
        )


def _format_token(target: TargetFormat, arch: str) -> str:
    if target is TargetFormat.DEBIAN_PACKAGE:
        return _DEB_TOKENS.get(arch, arch)
    if target is TargetFormat.RPM_PACKAGE:
        return _RPM_TOKENS.get(arch, arch)
    if target is TargetFormat.WINDOWS_INSTALLER:
        return arch
    return _POSIX_TOKENS.get(arch, arch)
