"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Objects with identity and lifecycle
- Identifiers: Frozen, typed UUID wrappers (DeckId, FileId, ...)
- Domain Services: Stateless rules such as image URL mapping
"""
