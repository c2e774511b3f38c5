"""Directory layout for a single asset build."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..formats import TargetFormat

_INSTALL_BIN = {
    TargetFormat.PORTABLE_ARCHIVE: ".",
    TargetFormat.LINUX_PORTABLE_BUNDLE: "/usr/bin",
    TargetFormat.SANDBOXED_APP: "/app/bin",
    TargetFormat.WINDOWS_INSTALLER: "{app}",
}


@dataclass(frozen=True, slots=True)
class BuildTree:
    """Paths used while staging one target format.

    The staging tree mirrors an install prefix: ``AppDir/usr/{bin,share}``.
    Generated manifests that tools consume from outside the prefix sit in
    ``build_root`` next to ``AppDir``.
    """

    build_root: Path
    app_id: str
    format: TargetFormat

    @classmethod
    def create(cls, output_dir: Path, target: TargetFormat, app_id: str) -> "BuildTree":
        return cls(build_root=output_dir / f"{app_id}-{target.value}", app_id=app_id, format=target)

    @property
    def app_dir(self) -> Path:
        return self.build_root / "AppDir"

    @property
    def app_root(self) -> Path:
        return self.app_dir / "usr"

    @property
    def app_bin(self) -> Path:
        return self.app_root / "bin"

    @property
    def app_share(self) -> Path:
        return self.app_root / "share"

    @property
    def share_icons(self) -> Path:
        return self.app_share / "icons"

    @property
    def desktop_path(self) -> Path:
        return self.app_share / "applications" / f"{self.app_id}.desktop"

    @property
    def metainfo_path(self) -> Path:
        return self.app_share / "metainfo" / f"{self.app_id}.metainfo.xml"

    @property
    def flatpak_manifest_path(self) -> Path:
        return self.build_root / f"{self.app_id}.yml"

    @property
    def rpm_spec_path(self) -> Path:
        return self.build_root / f"{self.app_id}.spec"

    @property
    def bundle_source(self) -> str:
        """Bundle root relative to ``build_root``, as referenced by the flatpak manifest."""

        return self.app_root.relative_to(self.build_root).as_posix() + "/"

    @property
    def install_bin(self) -> str:
        """Directory the executable occupies once installed on the target system."""

        if self.format in (TargetFormat.DEBIAN_PACKAGE, TargetFormat.RPM_PACKAGE):
            return f"/opt/{self.app_id}"
        return _INSTALL_BIN[self.format]
