"""
EntityStore - durable, ordered map from a string key to one record type.

Every entity type gets its own store. There are no foreign keys, no
secondary indexes and no multi-store transactions: referential integrity is
the managers' job. Backends:

- MemoryStore  (this module)   - tests and local runs
- MongoStore   (db/mongodb.py) - one collection per store
- SqlStore     (db/postgres.py) - one key/value table per store

Records are stored in their JSON form and re-validated on read, so callers
never hold a reference into the store itself.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

V = TypeVar("V", bound=BaseModel)


class EntityStore(ABC, Generic[V]):
    """
    Contract shared by all backends.

    - get(key)           -> record or None
    - insert(key, value) -> value   (upsert: an existing key is overwritten)
    - remove(key)        -> removed record, or None if absent
    - values()           -> every record, ascending by key

    Backend failures surface as core.errors.StorageError.
    """

    def __init__(self, name: str, model: Type[V]):
        self.name = name
        self.model = model

    @abstractmethod
    def get(self, key: str) -> Optional[V]:
        ...

    @abstractmethod
    def insert(self, key: str, value: V) -> V:
        ...

    @abstractmethod
    def remove(self, key: str) -> Optional[V]:
        ...

    @abstractmethod
    def values(self) -> List[V]:
        ...

    def _dump(self, value: V) -> dict:
        return value.model_dump(mode="json")

    def _load(self, data: dict) -> V:
        return self.model.model_validate(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class MemoryStore(EntityStore[V]):
    """In-process store. Not durable; used for tests and the 'memory' backend."""

    def __init__(self, name: str, model: Type[V]):
        super().__init__(name, model)
        self._rows: Dict[str, dict] = {}

    def get(self, key: str) -> Optional[V]:
        row = self._rows.get(key)
        return self._load(row) if row is not None else None

    def insert(self, key: str, value: V) -> V:
        self._rows[key] = self._dump(value)
        return value

    def remove(self, key: str) -> Optional[V]:
        row = self._rows.pop(key, None)
        return self._load(row) if row is not None else None

    def values(self) -> List[V]:
        return [self._load(self._rows[key]) for key in sorted(self._rows)]

    def __len__(self) -> int:
        return len(self._rows)
