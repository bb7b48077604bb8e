"""
User Routes

POST   /users/register           - Register (or re-register) the caller
GET    /users/me                 - Get own profile
GET    /users/me/education       - List own education history
POST   /users/me/education       - Add education history
PUT    /users/me/education/{id}  - Update education history
DELETE /users/me/education/{id}  - Remove education history
GET    /users/me/work            - List own work history
POST   /users/me/work            - Add work history
PUT    /users/me/work/{id}       - Update work history
DELETE /users/me/work/{id}       - Remove work history
"""

from fastapi import APIRouter, Depends
from typing import List

from jobportal.api.deps import get_services, respond
from jobportal.core.auth import get_identity_context
from jobportal.core.context import IdentityContext
from jobportal.services import PortalServices
from jobportal.schemas.schemas import (
    EducationHistory, EducationHistoryPayload, User, UserRegister, WorkHistory, WorkHistoryPayload
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/register", response_model=User)
async def register(
    data: UserRegister,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    """Register the caller. Registering again overwrites the profile."""
    return respond(services.users.register(ctx, data))


@router.get("/me", response_model=User)
async def get_profile(
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.users.get_profile(ctx))


# ============================================================
# EDUCATION HISTORY
# ============================================================

@router.get("/me/education", response_model=List[EducationHistory])
async def list_education(
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.education.list(ctx))


@router.post("/me/education", response_model=EducationHistory, status_code=201)
async def add_education(
    data: EducationHistoryPayload,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.education.add(ctx, data))


@router.put("/me/education/{record_id}", response_model=EducationHistory)
async def update_education(
    record_id: str,
    data: EducationHistoryPayload,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.education.update(ctx, record_id, data))


@router.delete("/me/education/{record_id}", response_model=EducationHistory)
async def remove_education(
    record_id: str,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.education.remove(ctx, record_id))


# ============================================================
# WORK HISTORY
# ============================================================

@router.get("/me/work", response_model=List[WorkHistory])
async def list_work(
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.work.list(ctx))


@router.post("/me/work", response_model=WorkHistory, status_code=201)
async def add_work(
    data: WorkHistoryPayload,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.work.add(ctx, data))


@router.put("/me/work/{record_id}", response_model=WorkHistory)
async def update_work(
    record_id: str,
    data: WorkHistoryPayload,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.work.update(ctx, record_id, data))


@router.delete("/me/work/{record_id}", response_model=WorkHistory)
async def remove_work(
    record_id: str,
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.work.remove(ctx, record_id))
