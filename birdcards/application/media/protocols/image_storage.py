"""Protocol for the on-disk image store."""

from pathlib import Path
from typing import Protocol


class ImageStorageProtocol(Protocol):
    """
    Byte storage for uploaded images, confined to a single uploads root.

    Every method resolves stored_name through the same confinement check and
    raises InvalidPathError when it would escape the root.
    """

    def resolve(self, stored_name: str) -> Path:
        """Absolute path for a stored name inside the uploads root."""
        ...

    def save(self, stored_name: str, content: bytes) -> Path:
        """Write content under stored_name, all-or-nothing."""
        ...

    def find(self, stored_name: str) -> Path | None:
        """Path of the stored file, or None if it is not on disk."""
        ...

    def delete(self, stored_name: str) -> bool:
        """
        Remove a stored file.

        Returns:
            True if a file was removed, False if it was already absent
        """
        ...
