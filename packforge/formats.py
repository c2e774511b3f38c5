"""Target packaging formats."""

from __future__ import annotations

from enum import Enum


class TargetFormat(str, Enum):
    """Packaging output kind selected for a single build."""

    PORTABLE_ARCHIVE = "zip"
    LINUX_PORTABLE_BUNDLE = "appimage"
    SANDBOXED_APP = "flatpak"
    DEBIAN_PACKAGE = "deb"
    RPM_PACKAGE = "rpm"
    WINDOWS_INSTALLER = "setup"

    @property
    def is_linux(self) -> bool:
        """True for formats that install desktop integration on Linux."""

        return self in _LINUX_FORMATS

    @property
    def is_windows(self) -> bool:
        return self is TargetFormat.WINDOWS_INSTALLER

    @property
    def uses_single_icon(self) -> bool:
        return self in (TargetFormat.WINDOWS_INSTALLER, TargetFormat.LINUX_PORTABLE_BUNDLE)

    @classmethod
    def parse(cls, value: str) -> "TargetFormat":
        """Parse a format from its value or member name, case-insensitively."""

        normalized = value.strip().lower()
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown target format '{value}' (expected one of: {choices})")


_LINUX_FORMATS = frozenset(
    {
        TargetFormat.LINUX_PORTABLE_BUNDLE,
        TargetFormat.SANDBOXED_APP,
        TargetFormat.DEBIAN_PACKAGE,
        TargetFormat.RPM_PACKAGE,
    }
)
