"""
Upload validation for flashcard images.

Produces the storage filename for an accepted upload. Only the file id and a
cross-validated extension survive into that name; the rest of the client's
filename is discarded.
"""

from pathlib import PurePosixPath, PureWindowsPath

from birdcards.domain.common.value_objects.ids import FileId
from birdcards.exceptions import PayloadTooLargeError, UnsupportedMediaTypeError

# Default ceiling (5MB)
MAX_UPLOAD_SIZE = 5 * 1024 * 1024

# Declared MIME type -> extensions conventionally paired with it
ALLOWED_MIME_TYPES: dict[str, tuple[str, ...]] = {
    "image/jpeg": (".jpg", ".jpeg"),
    "image/png": (".png",),
    "image/gif": (".gif",),
    "image/webp": (".webp",),
}

# Non-standard aliases some clients send
MIME_ALIASES = {"image/jpg": "image/jpeg"}

# Extension -> MIME type, used when serving files that have no record
EXTENSION_MIME_TYPES: dict[str, str] = {
    ext: mime for mime, extensions in ALLOWED_MIME_TYPES.items() for ext in extensions
}

# WebP header requires at least 12 bytes for validation
WEBP_MIN_HEADER_SIZE = 12


def normalize_mime_type(declared_mime: str | None) -> str | None:
    """Lower-case, strip parameters and resolve aliases."""
    if not declared_mime:
        return None
    mime = declared_mime.split(";", 1)[0].strip().lower()
    return MIME_ALIASES.get(mime, mime)


def detect_image_type(content: bytes) -> str | None:
    """
    Detect image type by checking magic bytes.

    Returns:
        MIME type (image/jpeg, image/png, image/gif, image/webp) or None
    """
    if content.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"

    if content.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"

    if content.startswith((b"GIF87a", b"GIF89a")):
        return "image/gif"

    # RIFF header followed by size, then WEBP
    if (
        content.startswith(b"RIFF")
        and len(content) >= WEBP_MIN_HEADER_SIZE
        and content[8:12] == b"WEBP"
    ):
        return "image/webp"

    return None


def _extension_of(original_name: str) -> str:
    # Clients may send either separator; only the last component matters
    basename = PureWindowsPath(PurePosixPath(original_name).name).name
    return PurePosixPath(basename).suffix.lower()


class UploadValidator:
    """Validates size, declared type, extension and content of an upload."""

    def __init__(self, max_size_bytes: int = MAX_UPLOAD_SIZE) -> None:
        self.max_size_bytes = max_size_bytes

    def validate(
        self,
        file_id: FileId,
        declared_mime: str | None,
        original_name: str,
        size_bytes: int,
        content: bytes,
    ) -> tuple[str, str]:
        """
        Validate an upload and build its storage filename.

        Args:
            file_id: Freshly generated id the file will be stored under
            declared_mime: Content type sent by the client
            original_name: Filename sent by the client
            size_bytes: Size of the upload in bytes
            content: File content, at least its leading bytes

        Returns:
            Tuple of (stored_name, normalized MIME type)

        Raises:
            PayloadTooLargeError: If the upload exceeds the size ceiling
            UnsupportedMediaTypeError: If type, extension or content is not an
                allowed and mutually consistent image type
        """
        if size_bytes > self.max_size_bytes:
            raise PayloadTooLargeError(size_bytes, self.max_size_bytes)

        mime_type = normalize_mime_type(declared_mime)
        if mime_type not in ALLOWED_MIME_TYPES:
            raise UnsupportedMediaTypeError("Invalid file type. Only images are allowed.")

        extension = _extension_of(original_name)
        if extension not in ALLOWED_MIME_TYPES[mime_type]:
            raise UnsupportedMediaTypeError("File extension does not match MIME type")

        if detect_image_type(content) != mime_type:
            raise UnsupportedMediaTypeError("File content does not match MIME type")

        return f"{file_id.value}{extension}", mime_type
