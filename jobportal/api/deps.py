"""
API dependencies - manager access and Result -> HTTP translation.
"""

from fastapi import Request, status

from jobportal.core.errors import ErrorKind, Failure, Result
from jobportal.services import PortalServices

STATUS_BY_KIND = {
    ErrorKind.validation_failed: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    ErrorKind.not_authorized: status.HTTP_403_FORBIDDEN,
    ErrorKind.conflict: status.HTTP_409_CONFLICT,
}


class OperationFailed(Exception):
    """Raised by routes for a failed Result; rendered by the app's exception handler."""

    def __init__(self, failure: Failure):
        super().__init__(failure.detail)
        self.failure = failure

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.failure.kind]


def get_services(request: Request) -> PortalServices:
    """Dependency - the PortalServices built at startup."""
    return request.app.state.services


def respond(result: Result):
    """Return the success value, or raise OperationFailed for the failure."""
    if not result.is_ok:
        raise OperationFailed(result.error)
    return result.value
