"""Asset assembly orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from ..formats import TargetFormat
from ..schemas.config import AppConfig
from .architecture import ArchitectureResolver, HostInfo, ResolvedArchitecture, detect_host
from .fileops import FileOps
from .icons import IconPlan, default_icons, resolve_icons
from .layout import BuildTree
from .macros import MacroExpander, build_symbol_table
from .manifests import ContentReader, desktop_entry, flatpak_manifest, metainfo_document, rpm_spec
from .utils import read_normalized_text

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildRequest:
    """Inputs describing one asset build."""

    target: TargetFormat
    output_dir: Path
    runtime: Optional[str] = None
    arch_override: Optional[str] = None
    built_at: Optional[datetime] = None
    default_icon_dir: Optional[Path] = None


@dataclass(frozen=True, slots=True)
class ArtifactSet:
    """Generated text artifacts and icon plan for one target format.

    Artifacts that do not apply to the format are None. Only RPM builds carry a
    ``package_spec``; DEB builds leave it None.
    """

    config: AppConfig
    tree: BuildTree
    architecture: ResolvedArchitecture
    macros: Mapping[str, str]
    icons: IconPlan
    desktop_entry: Optional[str] = None
    metainfo: Optional[str] = None
    package_spec: Optional[str] = None
    flatpak_manifest: Optional[str] = None

    @property
    def target(self) -> TargetFormat:
        return self.architecture.format

    def rpm_spec(self, files: Optional[Sequence[str]] = None) -> str:
        """Return the RPM spec, with the staged ``files`` or the placeholder list."""

        return rpm_spec(self.config, self.macros, files)

    def documents(self) -> Dict[Path, str]:
        """Map each present text artifact to its layout path."""

        candidates = (
            (self.tree.desktop_path, self.desktop_entry),
            (self.tree.metainfo_path, self.metainfo),
            (self.tree.rpm_spec_path, self.package_spec),
            (self.tree.flatpak_manifest_path, self.flatpak_manifest),
        )
        return {path: content for path, content in candidates if content is not None}

    def to_dict(self) -> Dict[str, object]:
        return {
            "target": self.target.value,
            "architecture": {
                "runtime_id": self.architecture.runtime_id,
                "arch": self.architecture.arch,
                "token": self.architecture.token,
                "is_uncertain": self.architecture.is_uncertain,
            },
            "macros": dict(self.macros),
            "icons": {
                "source": str(self.icons.source) if self.icons.source else None,
                "destination": str(self.icons.destination) if self.icons.destination else None,
                "themed": {str(src): str(dst) for src, dst in self.icons.themed.items()},
            },
            "desktop_entry": self.desktop_entry,
            "metainfo": self.metainfo,
            "package_spec": self.package_spec,
            "flatpak_manifest": self.flatpak_manifest,
        }


class AssetsBuilder:
    """Resolves architecture, macros, icons and manifests for a build request."""

    def __init__(self, *, host: Optional[HostInfo] = None, reader: ContentReader = read_normalized_text) -> None:
        self.host = host or detect_host()
        self.reader = reader

    def build(self, config: AppConfig, request: BuildRequest) -> ArtifactSet:
        target = request.target
        architecture = ArchitectureResolver(self.host).resolve(target, request.runtime, request.arch_override)
        logger.info(
            "Assembling %s assets for %s (%s, arch %s)",
            target.value,
            config.app_id,
            architecture.runtime_id,
            architecture.token,
        )

        tree = BuildTree.create(request.output_dir, target, config.app_id)
        built_at = request.built_at or datetime.now(timezone.utc)
        table = build_symbol_table(config, architecture, tree, built_at)
        expander = MacroExpander(table)

        candidates = list(config.icons)
        if not candidates and request.default_icon_dir is not None:
            candidates = default_icons(request.default_icon_dir)
        icons = resolve_icons(target, candidates, tree)
        for source, destination in icons.themed.items():
            logger.debug("Icon %s -> %s", source, destination)

        desktop = desktop_entry(target, config, expander)
        metainfo = metainfo_document(target, config, expander, self.reader)

        package_spec = None
        if target is TargetFormat.RPM_PACKAGE:
            package_spec = rpm_spec(config, table)

        manifest = None
        if target is TargetFormat.SANDBOXED_APP:
            manifest = flatpak_manifest(config, tree)

        return ArtifactSet(
            config=config,
            tree=tree,
            architecture=architecture,
            macros=table,
            icons=icons,
            desktop_entry=desktop,
            metainfo=metainfo,
            package_spec=package_spec,
            flatpak_manifest=manifest,
        )


def validate_sources(config: AppConfig, ops: Optional[FileOps] = None) -> None:
    """Assert configured icon and metainfo files exist when ``assert_files`` is set."""

    if not config.assert_files:
        return
    ops = ops or FileOps()
    for icon in config.icons:
        ops.assert_exists(icon)
    ops.assert_exists(config.metainfo_file)


def write_artifacts(artifacts: ArtifactSet, ops: Optional[FileOps] = None) -> List[Path]:
    """Write text artifacts and copy icons into the build tree."""

    ops = ops or FileOps(artifacts.tree.build_root)
    written: List[Path] = []
    for path, content in artifacts.documents().items():
        if ops.write_file(path, content):
            written.append(path)

    plan = artifacts.icons
    if plan.source is not None and plan.destination is not None:
        ops.copy_file(plan.source, plan.destination, ensure_directory=True)
        written.append(plan.destination)
    for source, destination in plan.themed.items():
        ops.copy_file(source, destination, ensure_directory=True)
        written.append(destination)
    return written
