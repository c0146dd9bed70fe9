"""Repository for image files on disk."""

import logging
import os
import tempfile
from pathlib import Path, PurePosixPath, PureWindowsPath

from birdcards.exceptions import InvalidPathError

logger = logging.getLogger(__name__)


class ImageFileRepository:
    """
    Stores flashcard images as flat files under a single uploads root.

    Every operation goes through resolve(), which reduces a stored name to its
    basename and refuses anything that does not land directly inside the root.
    """

    def __init__(self, uploads_root: Path) -> None:
        self.uploads_root = Path(uploads_root).resolve()

    def resolve(self, stored_name: str) -> Path:
        """
        Resolve a stored name to an absolute path inside the uploads root.

        Args:
            stored_name: Name of the stored file, any directory part is dropped

        Returns:
            Absolute path of the file

        Raises:
            InvalidPathError: If the name resolves outside the uploads root
        """
        basename = PureWindowsPath(PurePosixPath(stored_name).name).name
        file_path = (self.uploads_root / basename).resolve()

        if not basename or file_path.parent != self.uploads_root:
            logger.error(f"Rejected path outside uploads root: {stored_name!r}")
            raise InvalidPathError(stored_name)
        return file_path

    def save(self, stored_name: str, content: bytes) -> Path:
        """
        Write an image to disk.

        Content goes to a temporary file in the uploads root first and is
        renamed into place, so a failed write never leaves a partial file
        under the final name.

        Returns:
            Path to the saved file
        """
        file_path = self.resolve(stored_name)
        self.uploads_root.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.uploads_root, prefix=".upload-", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as tmp_file:
                tmp_file.write(content)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            os.replace(tmp_name, file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info(f"Saved image file: {file_path.name}")
        return file_path

    def find(self, stored_name: str) -> Path | None:
        """
        Find an image on disk.

        Returns:
            Path to the image file, or None if not found
        """
        file_path = self.resolve(stored_name)
        return file_path if file_path.is_file() else None

    def delete(self, stored_name: str) -> bool:
        """
        Delete an image from disk.

        Returns:
            True if file was deleted, False if it did not exist

        Raises:
            OSError: If the file exists but cannot be removed
        """
        file_path = self.resolve(stored_name)
        try:
            file_path.unlink()
        except FileNotFoundError:
            logger.info(f"No image file found for {file_path.name}")
            return False
        logger.info(f"Deleted image file: {file_path.name}")
        return True
