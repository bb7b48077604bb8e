"""
Application Service - job seekers applying to open jobs.
"""

import logging
from typing import List, Optional

from jobportal.core.context import IdentityContext
from jobportal.core.errors import Conflict, NotAuthorized, NotFound, operation
from jobportal.db.store import EntityStore
from jobportal.schemas.schemas import ApplicationCreate, Job, JobApplication, User
from jobportal.services.base import BaseManager, IdFactory

logger = logging.getLogger(__name__)


class JobApplicationManager(BaseManager):
    label = "Application"

    def __init__(
        self,
        store: EntityStore[JobApplication],
        jobs: EntityStore[Job],
        users: EntityStore[User],
        id_factory: Optional[IdFactory] = None
    ):
        super().__init__(store, id_factory)
        self.jobs = jobs
        self.users = users

    @operation
    def apply(self, ctx: IdentityContext, payload) -> JobApplication:
        """
        Apply to a job.

        Checks, in order: the job exists, the job is open, the caller is a
        registered user. Repeat applications to the same job are allowed.
        """
        data = self._validate(payload, ApplicationCreate)

        job = self.jobs.get(data.job_id)
        if job is None:
            raise NotFound("Job not found")
        if not job.is_open:
            raise Conflict("Job is closed")
        if self.users.get(ctx.current_identity()) is None:
            raise NotAuthorized("You are not registered")

        application = JobApplication(
            id=self.new_id(),
            job_id=job.id,
            user_id=ctx.current_identity(),
            cover_letter=data.cover_letter,
            resume=data.resume,
            portfolio=data.portfolio,
            application_date=ctx.now()
        )
        self.store.insert(application.id, application)
        logger.info("User %s applied to job %s (%s)", application.user_id, job.id, application.id)
        return application

    @operation
    def list_mine(self, ctx: IdentityContext) -> List[JobApplication]:
        identity = ctx.current_identity()
        return [app for app in self.store.values() if app.user_id == identity]

    @operation
    def list_for_job(self, ctx: IdentityContext, job_id: str) -> List[JobApplication]:
        """Applications received for a job; only its post owner may see them."""
        job = self.jobs.get(job_id)
        if job is None:
            raise NotFound("Job not found")
        self._check_owner(job.post_owner, ctx)
        return [app for app in self.store.values() if app.job_id == job_id]
