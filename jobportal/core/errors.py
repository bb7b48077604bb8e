"""
Error taxonomy and the operation result type.

Managers raise ServiceError subclasses internally. The @operation decorator
sits on every public manager method and turns those exceptions into a
Result, so nothing is ever raised across the operation boundary:

    result = services.jobs.close(ctx, job_id)
    if result.is_ok:
        job = result.value
    else:
        print(result.error.kind, result.error.detail)
"""

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorKind(str, Enum):
    validation_failed = "validation_failed"
    not_found = "not_found"
    not_authorized = "not_authorized"
    conflict = "conflict"


class Failure(BaseModel):
    kind: ErrorKind
    detail: str


# ============================================================
# EXCEPTIONS (internal to managers)
# ============================================================

class ServiceError(Exception):
    kind: ErrorKind = ErrorKind.conflict

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def failure(self) -> Failure:
        return Failure(kind=self.kind, detail=self.detail)


class ValidationFailed(ServiceError):
    kind = ErrorKind.validation_failed


class NotFound(ServiceError):
    kind = ErrorKind.not_found


class NotAuthorized(ServiceError):
    kind = ErrorKind.not_authorized


class Conflict(ServiceError):
    kind = ErrorKind.conflict


class StorageError(Exception):
    """The durable map rejected or failed a read/write."""


_ERRORS_BY_KIND = {
    ErrorKind.validation_failed: ValidationFailed,
    ErrorKind.not_found: NotFound,
    ErrorKind.not_authorized: NotAuthorized,
    ErrorKind.conflict: Conflict,
}


# ============================================================
# RESULT
# ============================================================

@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[Failure] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, failure: Failure) -> "Result[T]":
        return cls(error=failure)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the matching ServiceError."""
        if self.error is not None:
            raise _ERRORS_BY_KIND[self.error.kind](self.error.detail)
        return self.value


def describe_validation_error(exc) -> str:
    """Flatten pydantic errors into one line: 'field: message; ...'"""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid payload"


def operation(func: Callable[..., Any]) -> Callable[..., Result]:
    """
    Wrap a manager method so it returns a Result instead of raising.

    The wrapped method must take (self, ctx, ...) where ctx is an IdentityContext.
    """
    @functools.wraps(func)
    def wrapper(self, ctx, *args, **kwargs) -> Result:
        try:
            return Result.ok(func(self, ctx, *args, **kwargs))
        except ServiceError as exc:
            logger.info(
                "%s refused for %s: %s (%s)",
                func.__qualname__, ctx.current_identity(), exc.kind.value, exc.detail,
            )
            return Result.fail(exc.failure())
        except ValidationError as exc:
            detail = describe_validation_error(exc)
            logger.info("%s rejected payload from %s: %s", func.__qualname__, ctx.current_identity(), detail)
            return Result.fail(Failure(kind=ErrorKind.validation_failed, detail=detail))
        except StorageError as exc:
            logger.warning("%s storage failure: %s", func.__qualname__, exc)
            return Result.fail(Failure(kind=ErrorKind.conflict, detail=f"Storage error: {exc}"))

    return wrapper
