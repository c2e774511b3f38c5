from __future__ import annotations

import pytest

from packforge.assets.architecture import ArchitectureResolver, HostInfo, detect_host
from packforge.formats import TargetFormat

LINUX_X64 = HostInfo(simple_os="Linux", arch="x64")


@pytest.mark.parametrize(
    ("runtime", "expected"),
    [("linux-x64", "amd64"), ("linux-arm64", "arm64"), ("linux-x86", "x32"), ("linux-arm", "arm")],
)
def test_debian_tokens(runtime: str, expected: str) -> None:
    resolved = ArchitectureResolver(LINUX_X64).resolve(TargetFormat.DEBIAN_PACKAGE, runtime)
    assert resolved.token == expected
    assert not resolved.is_uncertain


@pytest.mark.parametrize(
    ("runtime", "expected"),
    [("linux-x64", "x86_64"), ("linux-arm64", "aarch64"), ("linux-x86", "i686")],
)
def test_rpm_tokens(runtime: str, expected: str) -> None:
    resolved = ArchitectureResolver(LINUX_X64).resolve(TargetFormat.RPM_PACKAGE, runtime)
    assert resolved.token == expected


def test_other_posix_formats_use_gnu_names() -> None:
    resolver = ArchitectureResolver(LINUX_X64)
    assert resolver.resolve(TargetFormat.LINUX_PORTABLE_BUNDLE, "linux-x64").token == "x86_64"
    assert resolver.resolve(TargetFormat.SANDBOXED_APP, "linux-arm64").token == "aarch64"


def test_windows_installer_passes_generic_arch_through() -> None:
    resolved = ArchitectureResolver(LINUX_X64).resolve(TargetFormat.WINDOWS_INSTALLER, "win-x64")
    assert resolved.token == "x64"
    assert resolved.is_windows_runtime


def test_override_wins() -> None:
    resolved = ArchitectureResolver(LINUX_X64).resolve(TargetFormat.DEBIAN_PACKAGE, "linux-x64", " x64compatible ")
    assert resolved.token == "x64compatible"
    assert resolved.arch == "x64"


def test_unknown_suffix_falls_back_to_host() -> None:
    host = HostInfo(simple_os="Linux", arch="arm64")
    resolved = ArchitectureResolver(host).resolve(TargetFormat.RPM_PACKAGE, "linux-musl-riscv64")
    assert resolved.is_uncertain
    assert resolved.arch == "arm64"
    assert resolved.token == "aarch64"


def test_missing_runtime_uses_host_default() -> None:
    resolved = ArchitectureResolver(LINUX_X64).resolve(TargetFormat.DEBIAN_PACKAGE, None)
    assert resolved.runtime_id == "linux-x64"
    assert resolved.token == "amd64"


def test_runtime_is_normalized() -> None:
    resolved = ArchitectureResolver(LINUX_X64).resolve(TargetFormat.RPM_PACKAGE, "  Linux-ARM64 ")
    assert resolved.runtime_id == "linux-arm64"


def test_detect_host() -> None:
    assert detect_host("Windows", "ARM64").default_runtime == "win-arm64"
    assert detect_host("Darwin", "arm64").default_runtime == "osx-x64"
    assert detect_host("Linux", "aarch64").default_runtime == "linux-arm64"
    assert detect_host("Linux", "x86_64") == HostInfo(simple_os="Linux", arch="x64")


@pytest.mark.parametrize(
    ("target", "runtime", "expected"),
    [
        (TargetFormat.LINUX_PORTABLE_BUNDLE, "linux-x86", "x86"),
        (TargetFormat.SANDBOXED_APP, "linux-arm", "arm"),
        (TargetFormat.WINDOWS_INSTALLER, "win-arm64", "arm64"),
        (TargetFormat.WINDOWS_INSTALLER, "win-x86", "x86"),
    ],
)
def test_unmapped_arch_passes_through(target: TargetFormat, runtime: str, expected: str) -> None:
    assert ArchitectureResolver(LINUX_X64).resolve(target, runtime).token == expected


def test_windows_installer_override_wins() -> None:
    resolved = ArchitectureResolver(LINUX_X64).resolve(TargetFormat.WINDOWS_INSTALLER, "win-x64", "x64compatible")
    assert resolved.token == "x64compatible"
    assert resolved.arch == "x64"
