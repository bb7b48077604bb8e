"""
User Service - job seeker profiles, keyed by caller identity.
"""

import logging

from jobportal.core.context import IdentityContext
from jobportal.core.errors import NotFound, operation
from jobportal.schemas.schemas import User, UserRegister
from jobportal.services.base import BaseManager

logger = logging.getLogger(__name__)


class UserManager(BaseManager):
    label = "User"

    @operation
    def register(self, ctx: IdentityContext, payload) -> User:
        """
        Register (or re-register) the caller.

        The record is keyed by identity, so registering again overwrites the
        previous profile - there is never more than one User per identity.
        """
        data = self._validate(payload, UserRegister)
        user = User(
            id=ctx.current_identity(),
            full_name=data.full_name,
            email=data.email,
            phone=data.phone,
            registered_at=ctx.now()
        )
        self.store.insert(user.id, user)
        logger.info("Registered user %s", user.id)
        return user

    @operation
    def get_profile(self, ctx: IdentityContext) -> User:
        user = self.store.get(ctx.current_identity())
        if user is None:
            raise NotFound("User not found")
        return user
