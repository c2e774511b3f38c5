"""Error types raised while assembling packaging assets."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence


class PackagingError(RuntimeError):
    """Base class for failures that abort an asset build."""


class InvalidIconNameError(PackagingError, ValueError):
    """Raised when a raster icon filename does not encode a supported size."""

    def __init__(self, path: Path | str, allowed: Iterable[int]) -> None:
        self.path = Path(path)
        self.allowed = tuple(allowed)
        sizes = ",".join(str(size) for size in self.allowed)
        super().__init__(
            f"Icon {self.path.name} must be of form 'name.size.png' or 'name.sizexsize.png', "
            f"where size = {sizes} only"
        )


class UnresolvedMacroError(PackagingError, KeyError):
    """Raised when a template references a macro that is not defined."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unresolved macro '${{{name}}}'")

    def __str__(self) -> str:
        return self.args[0]


class CyclicMacroError(PackagingError):
    """Raised when macro values reference each other in a loop."""

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__("Cyclic macro reference: " + " -> ".join(self.chain))


class EmptyTemplateError(PackagingError, ValueError):
    """Raised when a configured template file is blank."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"File is empty {self.path}")


class MissingRequiredFileError(PackagingError, FileNotFoundError):
    """Raised when a file the configuration asserts must exist is absent."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"File not found {self.path}")

    def __str__(self) -> str:
        return f"File not found {self.path}"


class DirectoryLayoutError(PackagingError, NotADirectoryError):
    """Raised when a destination directory is missing for a populate step."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Directory not found {self.path}")

    def __str__(self) -> str:
        return f"Directory not found {self.path}"
