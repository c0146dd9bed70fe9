"""
Domain common module.

Contains base classes for domain modeling:
- Entity: Objects with identity and lifecycle
- EntityId: Typed UUID identifiers
"""

from .entity import Entity, EntityId
from .exceptions import DomainError, EntityNotFoundError, ValidationError

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ValidationError",
]
