"""
Job Routes

GET    /jobs                    - List all open jobs
POST   /jobs                    - Create job posting (company admin only)
GET    /jobs/{id}               - Get job details
PUT    /jobs/{id}               - Update job (post owner only)
DELETE /jobs/{id}               - Delete job (post owner only)
POST   /jobs/{id}/close         - Close job (post owner only, no reopen)
POST   /jobs/{id}/apply         - Apply to job (registered users only)
GET    /jobs/{id}/applications  - Applications received (post owner only)
"""

from fastapi import APIRouter, Depends
from typing import List

from jobportal.api.deps import get_services, respond
from jobportal.core.auth import get_identity_context, get_optional_identity_context
from jobportal.core.context import IdentityContext
from jobportal.services import PortalServices
from jobportal.schemas.schemas import (
    ApplicationCreate, ApplicationLetter, Job, JobApplication, JobCreate, JobUpdate
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=List[Job])
async def list_jobs(
    ctx: IdentityContext = Depends(get_optional_identity_context),
    services: PortalServices = Depends(get_services)
):
    """List all open job postings."""
    return respond(services.jobs.list_open(ctx))


@router.post("", response_model=Job, status_code=201)
async def create_job(
    data: JobCreate,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    """Create a job under the caller's company (or data.company_id when given)."""
    return respond(services.jobs.create(ctx, data))


@router.get("/{job_id}", response_model=Job)
async def get_job(
    job_id: str,
    ctx: IdentityContext = Depends(get_optional_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.jobs.get(ctx, job_id))


@router.put("/{job_id}", response_model=Job)
async def update_job(
    job_id: str,
    data: JobUpdate,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.jobs.update(ctx, job_id, data))


@router.delete("/{job_id}", response_model=Job)
async def remove_job(
    job_id: str,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.jobs.remove(ctx, job_id))


@router.post("/{job_id}/close", response_model=Job)
async def close_job(
    job_id: str,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.jobs.close(ctx, job_id))


@router.post("/{job_id}/apply", response_model=JobApplication, status_code=201)
async def apply_to_job(
    job_id: str,
    data: ApplicationLetter,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    payload = ApplicationCreate(job_id=job_id, **data.model_dump())
    return respond(services.applications.apply(ctx, payload))


@router.get("/{job_id}/applications", response_model=List[JobApplication])
async def list_job_applications(
    job_id: str,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.applications.list_for_job(ctx, job_id))
