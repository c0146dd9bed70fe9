"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass
    class Deck(Entity[DeckId]):
        id: DeckId
        name: str

        def rename(self, name: str) -> None:
            self.name = name
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .exceptions import ValidationError


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed entity identifiers.

    Every identifier in this application wraps a UUID. Typed wrappers keep a
    DeckId from being passed where a FileId is expected.
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str | UUID) -> Self:
        """
        Build an identifier from user input.

        Raises:
            ValidationError: If the input is not a canonical UUID
        """
        if isinstance(raw, UUID):
            return cls(raw)
        try:
            parsed = UUID(raw)
        except (ValueError, AttributeError, TypeError):
            raise ValidationError(
                f"Invalid {cls.__name__}", field=cls.__name__, value=raw
            ) from None
        # UUID() also accepts braces, urn: prefixes and missing dashes
        if str(parsed) != raw.lower():
            raise ValidationError(f"Invalid {cls.__name__}", field=cls.__name__, value=raw)
        return cls(parsed)

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Identity-based equality for aggregates. Subclasses declare an `id` field."""

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
