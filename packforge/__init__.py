"""Packaging asset generation for application bundles."""

__version__ = "0.1.0"
from .assets import ArtifactSet, AssetsBuilder, BuildRequest
from .errors import (
    CyclicMacroError,
    DirectoryLayoutError,
    EmptyTemplateError,
    InvalidIconNameError,
    MissingRequiredFileError,
    PackagingError,
    UnresolvedMacroError,
)
from .formats import TargetFormat
from .schemas import AppConfig, FlatpakOptions, load_config

__all__ = [
    "__version__",
    "AppConfig",
    "ArtifactSet",
    "AssetsBuilder",
    "BuildRequest",
    "CyclicMacroError",
    "DirectoryLayoutError",
    "EmptyTemplateError",
    "FlatpakOptions",
    "InvalidIconNameError",
    "MissingRequiredFileError",
    "PackagingError",
    "TargetFormat",
    "UnresolvedMacroError",
    "load_config",
]
