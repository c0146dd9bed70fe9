"""Tests for image URL <-> file id conversion."""

import uuid

import pytest

from birdcards.domain.common.value_objects import FileId
from birdcards.domain.media.services.image_reference import build_image_url, extract_file_id


def test_build_image_url() -> None:
    file_id = FileId(uuid.UUID("6f1c2a4e-8d3b-4c5a-9e7f-0a1b2c3d4e5f"))
    assert build_image_url(file_id) == "/uploads/flashcards/6f1c2a4e-8d3b-4c5a-9e7f-0a1b2c3d4e5f"


def test_extract_reference_style_url() -> None:
    file_id = FileId.generate()
    assert extract_file_id(build_image_url(file_id)) == file_id


@pytest.mark.parametrize(
    "image_url",
    [
        None,
        "",
        "https://upload.wikimedia.org/wikipedia/commons/robin.jpg",
        "https://example.com/uploads/flashcards/6f1c2a4e-8d3b-4c5a-9e7f-0a1b2c3d4e5f",
        "/uploads/flashcards/",
        "/uploads/flashcards/6f1c2a4e-8d3b-4c5a-9e7f-0a1b2c3d4e5f/extra",
        "/uploads/flashcards/../secret",
        "/uploads/flashcards/not-a-uuid",
        "/uploads/avatars/6f1c2a4e-8d3b-4c5a-9e7f-0a1b2c3d4e5f",
    ],
)
def test_extract_ignores_other_urls(image_url: str | None) -> None:
    assert extract_file_id(image_url) is None
