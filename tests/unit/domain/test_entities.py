"""Tests for deck domain entities and identifiers."""

import uuid

import pytest

from birdcards.domain.common.exceptions import ValidationError
from birdcards.domain.common.value_objects import DeckId, FileId, UserId
from birdcards.domain.decks.entities.deck import Deck
from birdcards.domain.decks.entities.flashcard import Flashcard
from birdcards.domain.media.services.image_reference import build_image_url

EXTERNAL_URL = "https://example.com/robin.jpg"


def _card(image_url: str) -> Flashcard:
    return Flashcard.create(deck_id=DeckId.generate(), bird_name="Robin", image_url=image_url)


class TestEntityIdParse:
    def test_parse_canonical_uuid(self) -> None:
        raw = str(uuid.uuid4())
        assert str(FileId.parse(raw)) == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "not-a-uuid",
            "",
            "../etc/passwd",
            "{6f1c2a4e-8d3b-4c5a-9e7f-0a1b2c3d4e5f}",
            "6f1c2a4e8d3b4c5a9e7f0a1b2c3d4e5f",
            "urn:uuid:6f1c2a4e-8d3b-4c5a-9e7f-0a1b2c3d4e5f",
        ],
    )
    def test_parse_rejects_non_canonical(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            FileId.parse(raw)

    def test_ids_of_different_types_are_not_equal(self) -> None:
        value = uuid.uuid4()
        assert FileId(value) != DeckId(value)


class TestFlashcardImageReplacement:
    def test_replacing_uploaded_image_returns_previous_file(self) -> None:
        old, new = FileId.generate(), FileId.generate()
        card = _card(build_image_url(old))

        assert card.attach_uploaded_image(new) == old
        assert card.image_file_id == new

    def test_replacing_with_external_url_returns_previous_file(self) -> None:
        old = FileId.generate()
        card = _card(build_image_url(old))

        assert card.replace_image(EXTERNAL_URL) == old
        assert card.image_file_id is None

    def test_same_reference_returns_none(self) -> None:
        file_id = FileId.generate()
        card = _card(build_image_url(file_id))

        assert card.attach_uploaded_image(file_id) is None

    def test_external_previous_url_returns_none(self) -> None:
        card = _card(EXTERNAL_URL)

        assert card.attach_uploaded_image(FileId.generate()) is None

    def test_empty_image_url_rejected(self) -> None:
        card = _card(EXTERNAL_URL)

        with pytest.raises(ValidationError):
            card.replace_image("  ")
        assert card.image_url == EXTERNAL_URL

    def test_blank_bird_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Flashcard.create(deck_id=DeckId.generate(), bird_name=" ", image_url=EXTERNAL_URL)


class TestDeckUpdates:
    def test_rename_strips_whitespace(self) -> None:
        deck = Deck.create(user_id=UserId.generate(), name="Garden Birds")

        deck.rename("  Waders ")

        assert deck.name == "Waders"

    @pytest.mark.parametrize("name", ["", "   ", "x" * 201])
    def test_rename_rejects_invalid_name(self, name: str) -> None:
        deck = Deck.create(user_id=UserId.generate(), name="Garden Birds")

        with pytest.raises(ValidationError):
            deck.rename(name)
        assert deck.name == "Garden Birds"

    def test_blank_description_is_cleared(self) -> None:
        deck = Deck.create(user_id=UserId.generate(), name="Owls", description="Night birds")

        deck.update_description(" ")

        assert deck.description is None
