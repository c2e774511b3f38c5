"""Icon validation, selection and icon-theme layout."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..errors import InvalidIconNameError
from ..formats import TargetFormat
from .layout import BuildTree

logger = logging.getLogger(__name__)

STANDARD_ICON_SIZES = (16, 24, 32, 48, 64, 96, 128, 256)

DEFAULT_ICON_NAMES = (
    "app.svg",
    "app.ico",
    "app.16x16.png",
    "app.24x24.png",
    "app.32x32.png",
    "app.48x48.png",
)

# name.32.png or name.32x32.png
_SIZED_PNG = re.compile(r"\.(?P<size>\d+)(?:x(?P<height>\d+))?\.png$", re.IGNORECASE)


class IconKind(str, Enum):
    VECTOR = "vector"
    RASTER = "raster"
    INSTALLER = "installer"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class IconCandidate:
    path: Path
    kind: IconKind
    size: Optional[int] = None


@dataclass(frozen=True, slots=True)
class IconPlan:
    """Icons to install for one build.

    ``source``/``destination`` describe the single icon used by installer and
    portable bundle formats. ``themed`` maps each source to its icon-theme path.
    """

    source: Optional[Path] = None
    destination: Optional[Path] = None
    themed: Mapping[Path, Path] = field(default_factory=dict)


def icon_kind(path: Path) -> IconKind:
    suffix = path.suffix.lower()
    if suffix == ".svg":
        return IconKind.VECTOR
    if suffix == ".png":
        return IconKind.RASTER
    if suffix == ".ico":
        return IconKind.INSTALLER
    return IconKind.OTHER


def parse_png_size(path: Path | str) -> int:
    """Return the pixel size encoded in a raster icon filename."""

    name = Path(path).name
    match = _SIZED_PNG.search(name)
    if match is None:
        raise InvalidIconNameError(path, STANDARD_ICON_SIZES)
    size = int(match.group("size"))
    height = match.group("height")
    if height is not None and int(height) != size:
        raise InvalidIconNameError(path, STANDARD_ICON_SIZES)
    if size not in STANDARD_ICON_SIZES:
        raise InvalidIconNameError(path, STANDARD_ICON_SIZES)
    return size


def classify_icon(path: Path | str, *, strict: bool = True) -> IconCandidate:
    """Tag a candidate path with its kind, validating raster size names.

    With ``strict`` off, a badly named raster is returned with ``size`` None
    instead of raising.
    """

    candidate = Path(path)
    kind = icon_kind(candidate)
    if kind is not IconKind.RASTER:
        return IconCandidate(path=candidate, kind=kind)
    try:
        size = parse_png_size(candidate)
    except InvalidIconNameError:
        if strict:
            raise
        size = None
    return IconCandidate(path=candidate, kind=kind, size=size)


def classify_icons(paths: Iterable[Path | str]) -> List[IconCandidate]:
    return [classify_icon(path, strict=False) for path in paths]


def default_icons(directory: Path) -> List[Path]:
    return [directory / name for name in DEFAULT_ICON_NAMES]


def select_single_icon(target: TargetFormat, candidates: Sequence[IconCandidate]) -> Optional[Path]:
    """Pick the one icon used by installer and portable bundle formats.

    The installer takes the first ``.ico``. The portable bundle takes the first
    ``.svg`` if any, otherwise the largest sized ``.png`` (earliest on ties);
    a badly named ``.png`` is an error there. Other formats do not use a single icon.
    """

    if target is TargetFormat.WINDOWS_INSTALLER:
        return next((item.path for item in candidates if item.kind is IconKind.INSTALLER), None)

    if target is TargetFormat.LINUX_PORTABLE_BUNDLE:
        vector = next((item for item in candidates if item.kind is IconKind.VECTOR), None)
        if vector is not None:
            return vector.path

        best: Optional[IconCandidate] = None
        for item in candidates:
            if item.kind is not IconKind.RASTER:
                continue
            if item.size is None:
                raise InvalidIconNameError(item.path, STANDARD_ICON_SIZES)
            if best is None or item.size > best.size:
                best = item
        return best.path if best is not None else None

    return None


def themed_destination(candidate: IconCandidate, icons_root: Path, app_id: str) -> Optional[Path]:
    """Map a candidate into the hicolor theme, or None if it has no theme slot."""

    if candidate.kind is IconKind.VECTOR:
        return icons_root / "hicolor" / "scalable" / "apps" / f"{app_id}.svg"
    if candidate.kind is IconKind.RASTER:
        if candidate.size is None:
            logger.debug("Skipping icon without a theme size: %s", candidate.path)
            return None
        size = candidate.size
        return icons_root / "hicolor" / f"{size}x{size}" / "apps" / f"{app_id}.png"
    return None


def map_themed_icons(candidates: Iterable[IconCandidate], icons_root: Path, app_id: str) -> Dict[Path, Path]:
    """Return source to destination mappings, keeping the first source per destination."""

    mapping: Dict[Path, Path] = {}
    taken = set()
    for candidate in candidates:
        destination = themed_destination(candidate, icons_root, app_id)
        if destination is None or candidate.path in mapping or destination in taken:
            continue
        mapping[candidate.path] = destination
        taken.add(destination)
    return mapping


def resolve_icons(target: TargetFormat, paths: Sequence[Path], tree: BuildTree) -> IconPlan:
    """Build the icon plan for ``target`` from the candidate paths."""

    candidates = classify_icons(paths)
    source = select_single_icon(target, candidates)
    destination = None
    if source is not None:
        destination = tree.app_dir / f"{tree.app_id}{source.suffix.lower()}"

    themed: Dict[Path, Path] = {}
    if target.is_linux:
        themed = map_themed_icons(candidates, tree.share_icons, tree.app_id)

    return IconPlan(source=source, destination=destination, themed=themed)
