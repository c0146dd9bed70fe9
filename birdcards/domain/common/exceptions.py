"""
Errors raised by entities and value objects.

main.py maps them to HTTP responses: EntityNotFoundError becomes a 404,
every other DomainError a 400.
"""


class DomainError(Exception):
    """Base class for broken domain rules."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """
    An entity or identifier was given a value it cannot hold.

    ``field`` names the offending attribute when there is one, e.g. an empty
    ``bird_name`` or a deck id that is not a UUID.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value

    def __str__(self) -> str:
        if self.field is None:
            return self.message
        return f"{self.message} (field={self.field})"


class EntityNotFoundError(DomainError):
    """A lookup by id found nothing."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(f"{entity_type} {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id
