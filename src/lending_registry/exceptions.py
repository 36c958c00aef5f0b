"""
Exceptions for the lending registry.

Wrong-state requests (borrowing an item that is out, returning an item the
member does not hold, unknown ids) are ordinary outcomes and never raise.
Exceptions are reserved for caller mistakes that would break the registry's
invariants if they were accepted silently.
"""


class RegistryException(Exception):
    """Base exception for registry operations."""


class DuplicateError(RegistryException):
    """Raised when adding an item or member whose id is already registered."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity.capitalize()} {entity_id} is already registered")
        self.entity = entity
        self.entity_id = entity_id


class StateConflictError(RegistryException):
    """Raised when an item or member is registered while already part of a loan."""

    def __init__(self, entity: str, entity_id: str, reason: str):
        super().__init__(f"{entity.capitalize()} {entity_id} cannot be registered: {reason}")
        self.entity = entity
        self.entity_id = entity_id
        self.reason = reason
