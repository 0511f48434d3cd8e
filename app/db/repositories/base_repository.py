"""
Base repository - generic in-memory CRUD store (SOLID: Interface Segregation, Dependency Inversion).
Challenge: Monotonic ids, bounded size, one place for all data access.
Design: Not synchronized; one owner per process (single event loop).
"""

import dataclasses
from typing import Any, Generic, TypeVar

from app.core.exceptions import CapacityExceededError

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """Generic keyed store for frozen dataclass records with an ``id`` field."""

    def __init__(self, model: type[ModelType], max_records: int):
        self.model = model
        self.max_records = max_records
        self._records: dict[int, ModelType] = {}
        self._current_id = 0

    def next_id(self) -> int:
        """Allocate an id greater than every id this instance has handed out."""
        self._current_id += 1
        return self._current_id

    def get_all(self) -> list[ModelType]:
        """All records, in no particular order. Callers sort."""
        return list(self._records.values())

    def get_by_id(self, id: int) -> ModelType | None:
        return self._records.get(id)

    def add(self, entity: ModelType) -> ModelType:
        """Store a new record under its id. Raises CapacityExceededError when full."""
        if len(self._records) >= self.max_records:
            raise CapacityExceededError(
                f"Maximum {self.model.__name__.lower()} limit reached ({self.max_records})"
            )
        self._records[entity.id] = entity
        return entity

    def update(self, id: int, **fields: Any) -> ModelType | None:
        """Shallow merge of ``fields`` onto the stored record. None if the id is unknown."""
        existing = self._records.get(id)
        if existing is None:
            return None
        updated = dataclasses.replace(existing, **fields)
        self._records[id] = updated
        return updated

    def delete(self, id: int) -> bool:
        return self._records.pop(id, None) is not None

    def exists(self, id: int) -> bool:
        return id in self._records

    def count(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        """Drop every record and restart ids at 1. Administrative/test use only."""
        self._records.clear()
        self._current_id = 0
