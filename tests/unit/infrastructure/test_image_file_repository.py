"""Tests for ImageFileRepository path confinement and storage."""

from pathlib import Path

import pytest

from birdcards.exceptions import InvalidPathError
from birdcards.infrastructure.media.repositories.image_file_repository import (
    ImageFileRepository,
)


@pytest.fixture
def storage(tmp_path: Path) -> ImageFileRepository:
    root = tmp_path / "uploads"
    root.mkdir()
    return ImageFileRepository(root)


class TestResolve:
    def test_resolves_inside_root(self, storage: ImageFileRepository) -> None:
        path = storage.resolve("abc.jpg")
        assert path == storage.uploads_root / "abc.jpg"

    @pytest.mark.parametrize(
        "stored_name",
        ["../abc.jpg", "/etc/abc.jpg", "nested/dir/abc.jpg", "..\\..\\abc.jpg"],
    )
    def test_directory_components_are_stripped(
        self, storage: ImageFileRepository, stored_name: str
    ) -> None:
        assert storage.resolve(stored_name) == storage.uploads_root / "abc.jpg"

    @pytest.mark.parametrize("stored_name", ["", ".", "..", "../..", "dir/.."])
    def test_names_escaping_root_rejected(
        self, storage: ImageFileRepository, stored_name: str
    ) -> None:
        with pytest.raises(InvalidPathError):
            storage.resolve(stored_name)

    def test_symlink_out_of_root_rejected(self, storage: ImageFileRepository, tmp_path: Path) -> None:
        outside = tmp_path / "outside.jpg"
        outside.write_bytes(b"secret")
        (storage.uploads_root / "link.jpg").symlink_to(outside)

        with pytest.raises(InvalidPathError):
            storage.resolve("link.jpg")


class TestStorage:
    def test_save_find_delete(self, storage: ImageFileRepository) -> None:
        saved = storage.save("abc.png", b"data")

        assert saved.read_bytes() == b"data"
        assert storage.find("abc.png") == saved
        assert storage.delete("abc.png") is True
        assert storage.find("abc.png") is None

    def test_save_leaves_no_temporary_files(self, storage: ImageFileRepository) -> None:
        storage.save("abc.png", b"data")

        assert [p.name for p in storage.uploads_root.iterdir()] == ["abc.png"]

    def test_delete_missing_file(self, storage: ImageFileRepository) -> None:
        assert storage.delete("missing.png") is False

    def test_save_rejects_escaping_name(self, storage: ImageFileRepository, tmp_path: Path) -> None:
        with pytest.raises(InvalidPathError):
            storage.save("..", b"data")
        assert list(storage.uploads_root.iterdir()) == []
