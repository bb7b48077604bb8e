"""
Application Routes

GET /applications/mine - Applications submitted by the caller
"""

from fastapi import APIRouter, Depends
from typing import List

from jobportal.api.deps import get_services, respond
from jobportal.core.auth import get_identity_context
from jobportal.core.context import IdentityContext
from jobportal.services import PortalServices
from jobportal.schemas.schemas import JobApplication

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.get("/mine", response_model=List[JobApplication])
async def list_my_applications(
    ctx: IdentityContext = Depends(get_identity_context),
    services: PortalServices = Depends(get_services)
):
    return respond(services.applications.list_mine(ctx))
