"""
Job Service - job posts owned by a company admin.

State machine:
    open --close()--> closed   (terminal, no reopen)
    open/closed --remove()--> gone
"""

import logging
from typing import List, Optional

from jobportal.core.context import IdentityContext
from jobportal.core.errors import NotFound, NotAuthorized, ValidationFailed, operation
from jobportal.db.store import EntityStore
from jobportal.schemas.schemas import Company, Job, JobCreate, JobUpdate, PostStatus
from jobportal.services.base import BaseManager, IdFactory

logger = logging.getLogger(__name__)

JOB_MUTABLE_FIELDS = ("position", "requirements", "location", "salary", "description")


def _apply_job_update(job: Job, data: JobUpdate, now: int) -> Job:
    changes = {
        field: getattr(data, field)
        for field in JOB_MUTABLE_FIELDS
        if getattr(data, field) is not None
    }
    if not changes:
        raise ValidationFailed("No fields to update")
    changes["updated_at"] = now
    return job.model_copy(update=changes)


class JobManager(BaseManager):
    label = "Job"

    def __init__(self, store: EntityStore[Job], companies: EntityStore[Company], id_factory: Optional[IdFactory] = None):
        super().__init__(store, id_factory)
        self.companies = companies

    def _owned(self, ctx: IdentityContext, job_id: str) -> Job:
        job = self._require(job_id)
        self._check_owner(job.post_owner, ctx)
        return job

    def _target_company(self, ctx: IdentityContext, company_id: Optional[str]) -> Company:
        identity = ctx.current_identity()
        if company_id:
            company = self.companies.get(company_id)
            if company is None:
                raise NotFound("Company not found")
            if company.admin != identity:
                raise NotAuthorized("Not authorized")
            return company

        # No explicit target: first company (by key order) the caller administers
        for company in self.companies.values():
            if company.admin == identity:
                return company
        raise NotFound("Company not found")

    @operation
    def list_open(self, ctx: IdentityContext) -> List[Job]:
        return [job for job in self.store.values() if job.is_open]

    @operation
    def list_open_by_company(self, ctx: IdentityContext, company_id: str) -> List[Job]:
        return [
            job for job in self.store.values()
            if job.company_id == company_id and job.is_open
        ]

    @operation
    def get(self, ctx: IdentityContext, job_id: str) -> Job:
        return self._require(job_id)

    @operation
    def create(self, ctx: IdentityContext, payload) -> Job:
        data = self._validate(payload, JobCreate)
        company = self._target_company(ctx, data.company_id)

        job = Job(
            id=self.new_id(),
            company_id=company.id,
            position=data.position,
            requirements=data.requirements,
            location=data.location,
            salary=data.salary,
            description=data.description,
            post_owner=ctx.current_identity(),
            post_status=PostStatus.open,
            created_at=ctx.now(),
            updated_at=None
        )
        self.store.insert(job.id, job)
        logger.info("Created job %s for company %s by %s", job.id, company.id, ctx.current_identity())
        return job

    @operation
    def update(self, ctx: IdentityContext, job_id: str, payload) -> Job:
        job = self._owned(ctx, job_id)
        data = self._validate(payload, JobUpdate)

        updated = _apply_job_update(job, data, ctx.now())
        self.store.insert(job_id, updated)
        logger.info("Updated job %s for %s", job_id, ctx.current_identity())
        return updated

    @operation
    def close(self, ctx: IdentityContext, job_id: str) -> Job:
        job = self._owned(ctx, job_id)
        if not job.is_open:
            return job

        closed = job.model_copy(update={"post_status": PostStatus.closed})
        self.store.insert(job_id, closed)
        logger.info("Closed job %s for %s", job_id, ctx.current_identity())
        return closed

    @operation
    def remove(self, ctx: IdentityContext, job_id: str) -> Job:
        job = self._owned(ctx, job_id)
        self.store.remove(job_id)
        logger.info("Removed job %s for %s", job_id, ctx.current_identity())
        return job
