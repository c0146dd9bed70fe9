"""Tests for UploadValidator."""

import pytest

from birdcards.application.media.services.upload_validator import (
    UploadValidator,
    detect_image_type,
    normalize_mime_type,
)
from birdcards.domain.common.value_objects import FileId
from birdcards.exceptions import PayloadTooLargeError, UnsupportedMediaTypeError
from tests.conftest import GIF_BYTES, JPEG_BYTES, PNG_BYTES, WEBP_BYTES


@pytest.fixture
def file_id() -> FileId:
    return FileId.generate()


class TestUploadValidator:
    def test_stored_name_is_id_plus_extension(self, file_id: FileId) -> None:
        validator = UploadValidator()
        stored_name, mime_type = validator.validate(
            file_id, "image/jpeg", "My Robin Photo.JPEG", len(JPEG_BYTES), JPEG_BYTES
        )
        assert stored_name == f"{file_id.value}.jpeg"
        assert mime_type == "image/jpeg"

    def test_original_directories_are_discarded(self, file_id: FileId) -> None:
        validator = UploadValidator()
        stored_name, _ = validator.validate(
            file_id, "image/png", "..\\..\\windows\\tern.png", len(PNG_BYTES), PNG_BYTES
        )
        assert stored_name == f"{file_id.value}.png"

    def test_mime_parameters_and_case_are_ignored(self, file_id: FileId) -> None:
        validator = UploadValidator()
        _, mime_type = validator.validate(
            file_id, "Image/GIF; charset=binary", "owl.gif", len(GIF_BYTES), GIF_BYTES
        )
        assert mime_type == "image/gif"

    def test_size_ceiling(self, file_id: FileId) -> None:
        validator = UploadValidator(max_size_bytes=10)
        with pytest.raises(PayloadTooLargeError):
            validator.validate(file_id, "image/jpeg", "robin.jpg", 11, JPEG_BYTES)

    def test_size_checked_before_type(self, file_id: FileId) -> None:
        validator = UploadValidator(max_size_bytes=10)
        with pytest.raises(PayloadTooLargeError):
            validator.validate(file_id, "text/html", "index.html", 11, b"<html>")

    @pytest.mark.parametrize("mime", [None, "", "text/plain", "image/svg+xml", "image/bmp"])
    def test_rejects_unlisted_mime(self, file_id: FileId, mime: str | None) -> None:
        with pytest.raises(UnsupportedMediaTypeError):
            UploadValidator().validate(file_id, mime, "robin.jpg", 10, JPEG_BYTES)

    @pytest.mark.parametrize("name", ["robin.png", "robin", "robin.jpg.exe", "robin.", ".jpg.php"])
    def test_rejects_mismatched_extension(self, file_id: FileId, name: str) -> None:
        with pytest.raises(UnsupportedMediaTypeError):
            UploadValidator().validate(file_id, "image/jpeg", name, 10, JPEG_BYTES)

    def test_rejects_spoofed_content(self, file_id: FileId) -> None:
        with pytest.raises(UnsupportedMediaTypeError):
            UploadValidator().validate(file_id, "image/webp", "gull.webp", 10, b"<?php echo 1;")


class TestDetectImageType:
    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            (JPEG_BYTES, "image/jpeg"),
            (PNG_BYTES, "image/png"),
            (GIF_BYTES, "image/gif"),
            (b"GIF87a" + b"\x00" * 8, "image/gif"),
            (WEBP_BYTES, "image/webp"),
            (b"RIFF\x00\x00\x00\x00WAVE", None),
            (b"RIFF", None),
            (b"", None),
        ],
    )
    def test_detect(self, content: bytes, expected: str | None) -> None:
        assert detect_image_type(content) == expected


def test_normalize_mime_type_alias() -> None:
    assert normalize_mime_type("image/jpg") == "image/jpeg"
    assert normalize_mime_type(None) is None
