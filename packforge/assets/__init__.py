"""Packaging asset resolution and synthesis."""

from .architecture import ArchitectureResolver, HostInfo, ResolvedArchitecture, detect_host
from .builder import ArtifactSet, AssetsBuilder, BuildRequest, validate_sources, write_artifacts
from .fileops import FileOps
from .icons import IconCandidate, IconKind, IconPlan, classify_icon, classify_icons, parse_png_size, resolve_icons
from .layout import BuildTree
from .macros import Macro, MacroExpander, build_symbol_table
from .manifests import flatpak_manifest, metainfo_template, rpm_spec

__all__ = [
    "ArchitectureResolver",
    "ArtifactSet",
    "AssetsBuilder",
    "BuildRequest",
    "BuildTree",
    "FileOps",
    "HostInfo",
    "IconCandidate",
    "IconKind",
    "IconPlan",
    "Macro",
    "MacroExpander",
    "ResolvedArchitecture",
    "build_symbol_table",
    "classify_icon",
    "classify_icons",
    "detect_host",
    "flatpak_manifest",
    "metainfo_template",
    "parse_png_size",
    "resolve_icons",
    "rpm_spec",
    "validate_sources",
    "write_artifacts",
]
