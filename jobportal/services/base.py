"""
Shared plumbing for the entity managers.

A manager owns exactly one EntityStore (its only write target) and may be
handed other stores for read-only lookups. Every public operation takes an
IdentityContext first and is wrapped with @operation, so callers always get
a Result back.
"""

from typing import Callable, Optional, Type, TypeVar
from uuid import uuid4

from pydantic import BaseModel

from jobportal.core.context import IdentityContext
from jobportal.core.errors import NotAuthorized, NotFound
from jobportal.db.store import EntityStore

P = TypeVar("P", bound=BaseModel)

IdFactory = Callable[[], str]


def new_id() -> str:
    return str(uuid4())


class BaseManager:
    label = "Record"

    def __init__(self, store: EntityStore, id_factory: Optional[IdFactory] = None):
        self.store = store
        self.new_id = id_factory or new_id

    @staticmethod
    def _validate(payload, model: Type[P]) -> P:
        """Accept a schema instance or a plain dict; invalid input raises pydantic's ValidationError."""
        if isinstance(payload, model):
            return payload
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(exclude_unset=True)
        return model.model_validate(payload)

    def _require(self, key: str):
        record = self.store.get(key)
        if record is None:
            raise NotFound(f"{self.label} not found")
        return record

    @staticmethod
    def _check_owner(owner: str, ctx: IdentityContext) -> None:
        if owner != ctx.current_identity():
            raise NotAuthorized("Not authorized")
