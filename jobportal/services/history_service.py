"""
History Service - education and work history attached to a User.

Both record types follow the same ownership rules:
- the caller must have a User record to add one
- only the User named by user_id may update or remove one
- listing returns the caller's own records (empty list when there are none)
"""

import logging
from typing import List, Optional

from jobportal.core.context import IdentityContext
from jobportal.core.errors import NotFound, ValidationFailed, operation
from jobportal.db.store import EntityStore
from jobportal.schemas.schemas import (
    EducationHistory, EducationHistoryPayload, User, WorkHistory, WorkHistoryPayload
)
from jobportal.services.base import BaseManager, IdFactory

logger = logging.getLogger(__name__)


class UserRecordManager(BaseManager):
    """Common list/remove/ownership logic for records owned through user_id."""

    def __init__(self, store: EntityStore, users: EntityStore[User], id_factory: Optional[IdFactory] = None):
        super().__init__(store, id_factory)
        self.users = users

    def _require_user(self, ctx: IdentityContext) -> User:
        user = self.users.get(ctx.current_identity())
        if user is None:
            raise NotFound("User not found")
        return user

    def _owned(self, ctx: IdentityContext, record_id: str):
        record = self._require(record_id)
        self._check_owner(record.user_id, ctx)
        return record

    @operation
    def list(self, ctx: IdentityContext) -> List:
        identity = ctx.current_identity()
        return [record for record in self.store.values() if record.user_id == identity]

    @operation
    def remove(self, ctx: IdentityContext, record_id: str):
        record = self._owned(ctx, record_id)
        self.store.remove(record_id)
        logger.info("Removed %s %s for %s", self.label.lower(), record_id, record.user_id)
        return record


# ============================================================
# EDUCATION HISTORY
# ============================================================

def _check_education(data: EducationHistoryPayload) -> None:
    if data.year_of_graduation < data.year_of_entry:
        raise ValidationFailed("Year of graduation cannot be before year of entry")


def _apply_education_update(record: EducationHistory, data: EducationHistoryPayload) -> EducationHistory:
    # id, user_id and created_at are system-owned
    return record.model_copy(update={
        "education_level": data.education_level,
        "institution": data.institution,
        "field_of_study": data.field_of_study,
        "year_of_entry": data.year_of_entry,
        "year_of_graduation": data.year_of_graduation,
        "gpa": data.gpa,
        "description": data.description,
    })


class EducationHistoryManager(UserRecordManager):
    label = "Education history"

    @operation
    def add(self, ctx: IdentityContext, payload) -> EducationHistory:
        user = self._require_user(ctx)
        data = self._validate(payload, EducationHistoryPayload)
        _check_education(data)

        record = EducationHistory(
            id=self.new_id(),
            user_id=user.id,
            created_at=ctx.now(),
            **data.model_dump()
        )
        self.store.insert(record.id, record)
        logger.info("Added education history %s for %s", record.id, user.id)
        return record

    @operation
    def update(self, ctx: IdentityContext, record_id: str, payload) -> EducationHistory:
        record = self._owned(ctx, record_id)
        data = self._validate(payload, EducationHistoryPayload)
        _check_education(data)

        updated = _apply_education_update(record, data)
        self.store.insert(record_id, updated)
        logger.info("Updated education history %s for %s", record_id, ctx.current_identity())
        return updated


# ============================================================
# WORK HISTORY
# ============================================================

def _apply_work_update(record: WorkHistory, data: WorkHistoryPayload) -> WorkHistory:
    # id, user_id and created_at are system-owned
    return record.model_copy(update={
        "company_name": data.company_name,
        "position": data.position,
        "year_started": data.year_started,
        "year_ended": data.year_ended,
        "salary": data.salary,
        "description": data.description,
    })


class WorkHistoryManager(UserRecordManager):
    label = "Work history"

    @operation
    def add(self, ctx: IdentityContext, payload) -> WorkHistory:
        user = self._require_user(ctx)
        data = self._validate(payload, WorkHistoryPayload)

        record = WorkHistory(
            id=self.new_id(),
            user_id=user.id,
            created_at=ctx.now(),
            **data.model_dump()
        )
        self.store.insert(record.id, record)
        logger.info("Added work history %s for %s", record.id, user.id)
        return record

    @operation
    def update(self, ctx: IdentityContext, record_id: str, payload) -> WorkHistory:
        record = self._owned(ctx, record_id)
        data = self._validate(payload, WorkHistoryPayload)
        if data.year_started > data.year_ended:
            raise ValidationFailed("Year started cannot be after year ended")

        updated = _apply_work_update(record, data)
        self.store.insert(record_id, updated)
        logger.info("Updated work history %s for %s", record_id, ctx.current_identity())
        return updated
