"""Tests for deck API endpoints."""

import uuid
from datetime import UTC, datetime
from pathlib import Path

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from birdcards import models
from birdcards.infrastructure.media.repositories.image_file_repository import (
    ImageFileRepository,
)
from birdcards.infrastructure.media.workers.image_cleanup_worker import ImageCleanupWorker
from tests.conftest import PNG_BYTES, upload_image


class TestCreateDeck:
    """Test suite for POST /decks endpoint."""

    def test_create_deck_success(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        response = client.post(
            "/decks", json={"name": "  Garden Birds ", "description": "Backyard visitors"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        deck = response.json()["deck"]
        assert deck["name"] == "Garden Birds"
        assert deck["description"] == "Backyard visitors"
        assert deck["user_id"] == str(test_user.id)

        db_deck = db_session.get(models.Deck, uuid.UUID(deck["id"]))
        assert db_deck is not None
        assert db_deck.user_id == test_user.id

    def test_create_deck_blank_name(self, client: TestClient) -> None:
        response = client.post("/decks", json={"name": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Deck name cannot be empty"

    def test_create_deck_missing_name(self, client: TestClient) -> None:
        response = client.post("/decks", json={})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_deck_requires_authentication(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.post("/decks", json={"name": "Garden Birds"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["www-authenticate"] == "Bearer"

    def test_create_deck_with_invalid_token(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.post(
            "/decks",
            json={"name": "Garden Birds"},
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Could not validate credentials"


class TestGetDecks:
    """Test suite for GET /decks endpoints."""

    def test_get_decks_newest_first(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        other_deck: models.Deck,
    ) -> None:
        for day, name in [(1, "Waders"), (3, "Owls"), (2, "Finches")]:
            db_session.add(
                models.Deck(
                    user_id=test_user.id,
                    name=name,
                    created_at=datetime(2024, 5, day, tzinfo=UTC),
                )
            )
        db_session.commit()

        response = client.get("/decks")

        assert response.status_code == status.HTTP_200_OK
        names = [deck["name"] for deck in response.json()["decks"]]
        assert names == ["Owls", "Finches", "Waders"]

    def test_get_deck(self, client: TestClient, test_deck: models.Deck) -> None:
        response = client.get(f"/decks/{test_deck.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Garden Birds"

    def test_get_deck_of_other_user(self, client: TestClient, other_deck: models.Deck) -> None:
        response = client.get(f"/decks/{other_deck.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_deck_malformed_id(self, client: TestClient) -> None:
        response = client.get("/decks/not-a-uuid")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateDeck:
    """Test suite for PUT /decks/:deck_id endpoint."""

    def test_rename_deck(
        self, client: TestClient, db_session: Session, test_deck: models.Deck
    ) -> None:
        response = client.put(f"/decks/{test_deck.id}", json={"name": " Hedgerow Birds "})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Deck updated successfully"
        assert data["deck"]["name"] == "Hedgerow Birds"

        db_session.expire_all()
        assert db_session.get(models.Deck, test_deck.id).name == "Hedgerow Birds"

    def test_update_description_keeps_name(self, client: TestClient, test_deck: models.Deck) -> None:
        response = client.put(f"/decks/{test_deck.id}", json={"description": "Seen in May"})

        assert response.status_code == status.HTTP_200_OK
        deck = response.json()["deck"]
        assert deck["name"] == "Garden Birds"
        assert deck["description"] == "Seen in May"

    def test_blank_description_clears_it(self, client: TestClient, test_deck: models.Deck) -> None:
        client.put(f"/decks/{test_deck.id}", json={"description": "Seen in May"})

        response = client.put(f"/decks/{test_deck.id}", json={"description": "  "})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["deck"]["description"] is None

    def test_update_without_fields(self, client: TestClient, test_deck: models.Deck) -> None:
        response = client.put(f"/decks/{test_deck.id}", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "At least one of name or description must be provided"

    def test_rename_to_blank(self, client: TestClient, test_deck: models.Deck) -> None:
        response = client.put(f"/decks/{test_deck.id}", json={"name": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Deck name cannot be empty"

    @pytest.mark.parametrize("deck_id", [str(uuid.uuid4()), "not-a-uuid"])
    def test_update_unknown_deck(self, client: TestClient, deck_id: str) -> None:
        response = client.put(f"/decks/{deck_id}", json={"name": "Owls"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_deck_of_other_user(
        self, client: TestClient, db_session: Session, other_deck: models.Deck
    ) -> None:
        response = client.put(f"/decks/{other_deck.id}", json={"name": "Mine now"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        db_session.expire_all()
        assert db_session.get(models.Deck, other_deck.id).name == "Seabirds"


class TestDeleteDeck:
    """Test suite for DELETE /decks/:deck_id endpoint."""

    def test_delete_deck_removes_cards_records_and_images(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        uploads_root: Path,
        cleanup_worker: ImageCleanupWorker,
    ) -> None:
        deck_id = test_deck.id
        robin_id = upload_image(client, deck_id).json()["file_id"]
        tern_id = upload_image(
            client, deck_id, filename="tern.png", content=PNG_BYTES, content_type="image/png"
        ).json()["file_id"]
        card = client.post(
            f"/decks/{deck_id}/flashcards", json={"bird_name": "Robin", "file_id": robin_id}
        ).json()["flashcard"]

        response = client.delete(f"/decks/{deck_id}")
        cleanup_worker.join()

        assert response.status_code == status.HTTP_204_NO_CONTENT
        db_session.expire_all()
        assert db_session.get(models.Deck, deck_id) is None
        assert db_session.get(models.Flashcard, uuid.UUID(card["id"])) is None
        assert db_session.get(models.UploadedFile, uuid.UUID(robin_id)) is None
        assert db_session.get(models.UploadedFile, uuid.UUID(tern_id)) is None
        assert list(uploads_root.iterdir()) == []
        assert client.get(f"/uploads/flashcards/{robin_id}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_deck_leaves_other_decks_alone(
        self,
        client: TestClient,
        other_headers: dict[str, str],
        test_deck: models.Deck,
        other_deck: models.Deck,
        uploads_root: Path,
        cleanup_worker: ImageCleanupWorker,
    ) -> None:
        upload_image(client, test_deck.id)
        kept_id = upload_image(client, other_deck.id, headers=other_headers).json()["file_id"]

        client.delete(f"/decks/{test_deck.id}")
        cleanup_worker.join()

        assert [path.name for path in uploads_root.iterdir()] == [f"{kept_id}.jpg"]
        assert client.get(f"/uploads/flashcards/{kept_id}").status_code == status.HTTP_200_OK

    def test_file_removal_failure_does_not_affect_delete(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        uploads_root: Path,
        cleanup_worker: ImageCleanupWorker,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        deck_id = test_deck.id
        file_id = upload_image(client, deck_id).json()["file_id"]

        def failing_delete(self: ImageFileRepository, stored_name: str) -> bool:
            raise PermissionError("read-only file system")

        monkeypatch.setattr(ImageFileRepository, "delete", failing_delete)

        response = client.delete(f"/decks/{deck_id}")
        cleanup_worker.join()

        assert response.status_code == status.HTTP_204_NO_CONTENT
        db_session.expire_all()
        assert db_session.get(models.Deck, deck_id) is None
        assert (uploads_root / f"{file_id}.jpg").is_file()

    @pytest.mark.parametrize("deck_id", [str(uuid.uuid4()), "not-a-uuid"])
    def test_delete_unknown_deck(self, client: TestClient, deck_id: str) -> None:
        response = client.delete(f"/decks/{deck_id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_deck_of_other_user(
        self,
        client: TestClient,
        db_session: Session,
        other_deck: models.Deck,
        other_headers: dict[str, str],
    ) -> None:
        file_id = upload_image(client, other_deck.id, headers=other_headers).json()["file_id"]

        response = client.delete(f"/decks/{other_deck.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        db_session.expire_all()
        assert db_session.get(models.Deck, other_deck.id) is not None
        assert client.get(f"/uploads/flashcards/{file_id}").status_code == status.HTTP_200_OK
