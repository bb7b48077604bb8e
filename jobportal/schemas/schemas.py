"""
Pydantic Schemas - stored entities and request payloads

All schemas in one file for simplicity. Attributes are snake_case in Python;
camelCase aliases (fullName, yearOfEntry, ...) are accepted on input and
emitted by the API.
"""

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Annotated
from enum import Enum


def _not_blank(value: str) -> str:
    # blank input is rejected; the stored text is kept as sent
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonEmptyStr = Annotated[str, AfterValidator(_not_blank)]
Year = Annotated[int, Field(ge=0)]
Gpa = Annotated[float, Field(ge=0.0, le=4.0)]


class PortalModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================
# ENUMS
# ============================================================

class PostStatus(str, Enum):
    open = "open"
    closed = "closed"


# ============================================================
# USER SCHEMAS
# ============================================================

class UserRegister(PortalModel):
    full_name: NonEmptyStr
    email: NonEmptyStr
    phone: NonEmptyStr


class User(PortalModel):
    id: str  # == caller identity
    full_name: str
    email: str
    phone: str
    registered_at: int


# ============================================================
# EDUCATION / WORK HISTORY SCHEMAS
# ============================================================

class EducationHistoryPayload(PortalModel):
    education_level: NonEmptyStr
    institution: NonEmptyStr
    field_of_study: NonEmptyStr
    year_of_entry: Year
    year_of_graduation: Year
    gpa: Gpa
    description: str = ""


class EducationHistory(PortalModel):
    id: str
    user_id: str
    education_level: str
    institution: str
    field_of_study: str
    year_of_entry: int
    year_of_graduation: int
    gpa: float
    description: str
    created_at: int


class WorkHistoryPayload(PortalModel):
    company_name: NonEmptyStr
    position: NonEmptyStr
    year_started: Year
    year_ended: Year
    salary: NonEmptyStr
    description: NonEmptyStr


class WorkHistory(PortalModel):
    id: str
    user_id: str
    company_name: str
    position: str
    year_started: int
    year_ended: int
    salary: str
    description: str
    created_at: int


# ============================================================
# COMPANY SCHEMAS
# ============================================================

class CompanyCreate(PortalModel):
    name: NonEmptyStr
    email: NonEmptyStr
    phone: NonEmptyStr
    address: NonEmptyStr
    description: NonEmptyStr


class CompanyUpdate(PortalModel):
    name: Optional[NonEmptyStr] = None
    email: Optional[NonEmptyStr] = None
    phone: Optional[NonEmptyStr] = None
    address: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None


class Company(PortalModel):
    id: str
    name: str
    email: str
    phone: str
    address: str
    description: str
    admin: str
    created_at: int


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(PortalModel):
    position: NonEmptyStr
    requirements: NonEmptyStr
    location: NonEmptyStr
    salary: NonEmptyStr
    description: NonEmptyStr
    company_id: Optional[str] = Field(
        None, description="Target company; defaults to the caller's first company."
    )


class JobUpdate(PortalModel):
    position: Optional[NonEmptyStr] = None
    requirements: Optional[NonEmptyStr] = None
    location: Optional[NonEmptyStr] = None
    salary: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None


class Job(PortalModel):
    id: str
    company_id: str
    position: str
    requirements: str
    location: str
    salary: str
    description: str
    post_owner: str
    post_status: PostStatus = PostStatus.open
    created_at: int
    updated_at: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.post_status == PostStatus.open


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationLetter(PortalModel):
    cover_letter: NonEmptyStr
    resume: NonEmptyStr
    portfolio: Optional[str] = None


class ApplicationCreate(ApplicationLetter):
    job_id: NonEmptyStr


class JobApplication(PortalModel):
    id: str
    job_id: str
    user_id: str
    cover_letter: str
    resume: str
    portfolio: Optional[str] = None
    application_date: int
