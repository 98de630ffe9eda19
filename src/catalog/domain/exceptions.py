"""Domain-level exceptions.

Input problems are subclasses of DomainException so the CLI layer can
catch them uniformly and display user-friendly messages. Failures of
the storage and persistence collaborators derive from CollaboratorError
instead: they are infrastructure faults, not something the user typed.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field failed validation before any mutation was attempted."""

    def __init__(self, field: str, reason: str, message: str | None = None) -> None:
        self.field = field
        self.reason = reason
        super().__init__(message or f"Invalid {field}: {reason}")


class UnresolvedReferenceError(DomainException):
    """A required reference to another entity does not resolve."""

    def __init__(self, entity: str, entity_id: object) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"No {entity} exists with ID '{entity_id}'")


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(self, entity_id: object, entity: str = "Product") -> None:
        self.entity_id = entity_id
        self.entity = entity
        super().__init__(f"{entity} with ID '{entity_id}' not found")


class CollaboratorError(Exception):
    """A storage or persistence backend failed."""


class StorageError(CollaboratorError):
    """The file storage backend could not store a file."""


class PersistenceError(CollaboratorError):
    """The persistence backend could not read or write entities."""
