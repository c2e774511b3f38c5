"""File operations used when staging generated assets."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Optional

from ..errors import DirectoryLayoutError, MissingRequiredFileError
from .utils import write_text

logger = logging.getLogger(__name__)


class FileOps:
    """Performs staging file operations and logs each one.

    Paths are logged relative to ``root`` when it is given.
    """

    def __init__(self, root: Optional[Path] = None) -> None:
        self.root = root

    def assert_exists(self, path: Optional[Path]) -> None:
        if path is None:
            return
        if not Path(path).is_file():
            logger.error("Exists?: %s ... FAILED", self._display(path))
            raise MissingRequiredFileError(path)
        logger.debug("Exists?: %s ... OK", self._display(path))

    def create_directory(self, directory: Optional[Path]) -> None:
        if directory is None or directory.is_dir():
            return
        logger.info("Create Directory: %s", self._display(directory))
        directory.mkdir(parents=True, exist_ok=True)

    def remove_directory(self, directory: Optional[Path]) -> None:
        if directory is None or not directory.is_dir():
            return
        logger.info("Remove: %s", self._display(directory))
        shutil.rmtree(directory)

    def copy_directory(self, source: Optional[Path], destination: Optional[Path]) -> None:
        """Copy the contents of ``source`` into an existing ``destination``."""

        if source is None or destination is None:
            return
        logger.info("Populate: %s", self._display(destination))
        if not destination.is_dir():
            raise DirectoryLayoutError(destination)
        shutil.copytree(source, destination, dirs_exist_ok=True)

    def copy_file(self, source: Optional[Path], destination: Optional[Path], *, ensure_directory: bool = False) -> None:
        if source is None or destination is None:
            return
        if ensure_directory:
            self.create_directory(destination.parent)
        elif not destination.parent.is_dir():
            raise DirectoryLayoutError(destination.parent)
        logger.info("Create File: %s", self._display(destination))
        shutil.copyfile(source, destination)

    def write_file(self, path: Optional[Path], content: Optional[str]) -> bool:
        """Write ``content`` to ``path``; empty content is skipped."""

        if path is None or not content:
            return False
        logger.info("Create File: %s", self._display(path))
        write_text(path, content)
        return True

    def _display(self, path: Path) -> str:
        path = Path(path)
        if self.root is not None and path.is_relative_to(self.root):
            return path.relative_to(self.root).as_posix()
        return str(path)
