"""Base class for all aggregates."""

import abc


class Aggregate(abc.ABC):
    """Generic base class for all aggregates.

    An aggregate is identified by its `aggregate_id`, which is assigned once at
    construction and never changes. Equality and hashing follow the identity,
    not the current field values.
    """

    def __init__(self, aggregate_id: str) -> None:
        if not aggregate_id:
            raise ValueError("aggregate_id must be a non-empty string")
        self._aggregate_id: str = aggregate_id

    @property
    def aggregate_id(self) -> str:
        """The immutable identifier of the aggregate."""
        return self._aggregate_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Aggregate):
            return NotImplemented
        return type(self) is type(other) and self._aggregate_id == other._aggregate_id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._aggregate_id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(aggregate_id={self._aggregate_id!r})"
