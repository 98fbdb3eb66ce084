"""Aggregate representing a catalog category."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, NoReturn

from codeflix_catalog.domain import errors

from .base import Aggregate

if TYPE_CHECKING:
    from codeflix_catalog.interfaces.clock import Clock
    from codeflix_catalog.interfaces.id_generator import IdGenerator

# pylint: disable=too-many-arguments

logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000


class Category(Aggregate):
    """Aggregate root representing a category of catalog content.

    All fields are read-only properties. State changes only through
    `activate`, `deactivate` and `update`, and every change that touches
    `name` or `description` is validated before it is committed.
    """

    def __init__(
        self,
        aggregate_id: str,
        name: str,
        description: str,
        is_active: bool,
        created_at: datetime,
    ) -> None:
        """Build a category from already known field values.

        Use `Category.create` for new categories; this constructor exists for
        collaborators that already hold an id and creation timestamp.

        Raises:
            EntityValidationError: If `name` or `description` is invalid.
        """
        _validate(name, description)
        super().__init__(aggregate_id)
        self._name = name
        self._description = description
        self._is_active = is_active
        self._created_at = created_at

    # --- Construction Paths ---

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        is_active: bool = True,
        *,
        id_generator: IdGenerator,
        clock: Clock,
    ) -> Category:
        """Create a new category with a fresh id and creation timestamp.

        Args:
            name: The category name (3 to 255 characters, not blank).
            description: The category description (at most 10,000 characters,
                may be empty but not None).
            is_active: Initial activation state. Defaults to True.
            id_generator: Source of the new id. `codeflix_catalog.bootstrap`
                wires the configured one.
            clock: Source of the creation timestamp.

        Returns:
            Category: The newly created, fully valid category.

        Raises:
            EntityValidationError: If `name` or `description` is invalid. No
                category is returned in that case.
        """
        category = cls(
            aggregate_id=id_generator.new_id(),
            name=name,
            description=description,
            is_active=is_active,
            created_at=clock.now(),
        )
        logger.debug("Created category %s (%r)", category.id, category.name)
        return category

    # --- Read access ---

    @property
    def id(self) -> str:  # pylint: disable=invalid-name
        """The category id (same as `aggregate_id`)."""
        return self.aggregate_id

    @property
    def name(self) -> str:
        """The category name."""
        return self._name

    @property
    def description(self) -> str:
        """The category description."""
        return self._description

    @property
    def is_active(self) -> bool:
        """Whether the category is active."""
        return self._is_active

    @property
    def created_at(self) -> datetime:
        """When the category was created."""
        return self._created_at

    # --- State Transitions ---

    def activate(self) -> None:
        """Mark the category as active. Idempotent."""
        self._is_active = True
        logger.debug("Activated category %s", self.id)

    def deactivate(self) -> None:
        """Mark the category as inactive. Idempotent."""
        self._is_active = False
        logger.debug("Deactivated category %s", self.id)

    def update(self, name: str, description: str | None = None) -> None:
        """Replace the name and, when given, the description.

        The new values are validated before they are applied, so a failed
        update leaves the category unchanged.

        Args:
            name: The new name. Always replaces the current one.
            description: The new description. When None, the current
                description is kept.

        Raises:
            EntityValidationError: If the resulting name or description is invalid.
        """
        new_description = self._description if description is None else description
        _validate(name, new_description)
        self._name = name
        self._description = new_description
        logger.debug("Updated category %s", self.id)

    def __repr__(self) -> str:
        return (
            f"Category(id={self.id!r}, name={self._name!r}, "
            f"is_active={self._is_active!r}, created_at={self._created_at!r})"
        )


# --- Validation ---


def _validate(name: str | None, description: str | None) -> None:
    """Check the category invariants, raising on the first violation."""
    if name is None or not name.strip():
        _fail("Name should not be empty or null", "Name")
    if len(name) < NAME_MIN_LENGTH:
        _fail(f"Name should be at least {NAME_MIN_LENGTH} characters long", "Name")
    if len(name) > NAME_MAX_LENGTH:
        _fail(
            f"Name should be less or equal {NAME_MAX_LENGTH} characters long", "Name"
        )
    if description is None:
        _fail("Description should not be null", "Description")
    if len(description) > DESCRIPTION_MAX_LENGTH:
        _fail(
            f"Description should be less or equal {DESCRIPTION_MAX_LENGTH:,} "
            "characters long",
            "Description",
        )


def _fail(message: str, field_name: str) -> NoReturn:
    logger.debug("Category validation failed: %s", message)
    raise errors.EntityValidationError(message, field_name=field_name)
