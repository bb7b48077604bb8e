"""
Company Service - company profiles administered by one identity.

A company cannot be removed while any job still references it. There is no
foreign key to enforce that, so remove() scans the jobs store (O(n) over all
jobs). If job volume grows, a company_id -> job ids index is the next step.
"""

import logging
from typing import List, Optional

from jobportal.core.context import IdentityContext
from jobportal.core.errors import Conflict, ValidationFailed, operation
from jobportal.db.store import EntityStore
from jobportal.schemas.schemas import Company, CompanyCreate, CompanyUpdate, Job
from jobportal.services.base import BaseManager, IdFactory

logger = logging.getLogger(__name__)

COMPANY_MUTABLE_FIELDS = ("name", "email", "phone", "address", "description")


def _apply_company_update(company: Company, data: CompanyUpdate) -> Company:
    changes = {
        field: getattr(data, field)
        for field in COMPANY_MUTABLE_FIELDS
        if getattr(data, field) is not None
    }
    if not changes:
        raise ValidationFailed("No fields to update")
    return company.model_copy(update=changes)


class CompanyManager(BaseManager):
    label = "Company"

    def __init__(self, store: EntityStore[Company], jobs: EntityStore[Job], id_factory: Optional[IdFactory] = None):
        super().__init__(store, id_factory)
        self.jobs = jobs

    @operation
    def register(self, ctx: IdentityContext, payload) -> Company:
        """Create a company; the caller becomes its (permanent) admin."""
        data = self._validate(payload, CompanyCreate)
        company = Company(
            id=self.new_id(),
            admin=ctx.current_identity(),
            created_at=ctx.now(),
            **data.model_dump()
        )
        self.store.insert(company.id, company)
        logger.info("Registered company %s (admin %s)", company.id, company.admin)
        return company

    @operation
    def get(self, ctx: IdentityContext, company_id: str) -> Company:
        return self._require(company_id)

    @operation
    def list_mine(self, ctx: IdentityContext) -> List[Company]:
        identity = ctx.current_identity()
        return [company for company in self.store.values() if company.admin == identity]

    @operation
    def update(self, ctx: IdentityContext, company_id: str, payload) -> Company:
        company = self._require(company_id)
        self._check_owner(company.admin, ctx)
        data = self._validate(payload, CompanyUpdate)

        updated = _apply_company_update(company, data)
        self.store.insert(company_id, updated)
        logger.info("Updated company %s for %s", company_id, ctx.current_identity())
        return updated

    @operation
    def remove(self, ctx: IdentityContext, company_id: str) -> Company:
        company = self._require(company_id)
        self._check_owner(company.admin, ctx)

        if any(job.company_id == company_id for job in self.jobs.values()):
            raise Conflict("Company still has jobs")

        self.store.remove(company_id)
        logger.info("Removed company %s for %s", company_id, ctx.current_identity())
        return company
