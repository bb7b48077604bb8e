"""
Company Routes

POST   /companies            - Register company (caller becomes admin)
GET    /companies/mine       - Companies the caller administers
GET    /companies/{id}       - Get company
PUT    /companies/{id}       - Update company (admin only)
DELETE /companies/{id}       - Remove company (admin only, refused while it has jobs)
GET    /companies/{id}/jobs  - Open jobs of a company
"""

from fastapi import APIRouter, Depends
from typing import List

from jobportal.api.deps import get_services, respond
from jobportal.core.auth import get_identity_context, get_optional_identity_context
from jobportal.core.context import IdentityContext
from jobportal.services import PortalServices
from jobportal.schemas.schemas import Company, CompanyCreate, CompanyUpdate, Job

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post("", response_model=Company, status_code=201)
async def register_company(
    data: CompanyCreate,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.companies.register(ctx, data))


@router.get("/mine", response_model=List[Company])
async def list_my_companies(
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.companies.list_mine(ctx))


@router.get("/{company_id}", response_model=Company)
async def get_company(
    company_id: str,
    ctx: IdentityContext = Depends(get_optional_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.companies.get(ctx, company_id))


@router.put("/{company_id}", response_model=Company)
async def update_company(
    company_id: str,
    data: CompanyUpdate,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    """Update the fields present in the body; admin and created_at never change."""
    return respond(services.companies.update(ctx, company_id, data))


@router.delete("/{company_id}", response_model=Company)
async def remove_company(
    company_id: str,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    """Remove company. Returns 409 while any job still references it."""
    return respond(services.companies.remove(ctx, company_id))


@router.get("/{company_id}/jobs", response_model=List[Job])
async def list_company_jobs(
    company_id: str,
    ctx: IdentityContext = Depends(get_optional_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.jobs.list_open_by_company(ctx, company_id))
