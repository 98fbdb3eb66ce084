"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Validation errors
# ============================================================================


class EntityValidationError(DomainError):
    """Raised when an entity's fields violate one of its invariants.

    The message names exactly one violated rule, the first one found.
    """

    def __init__(self, message: str, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name
