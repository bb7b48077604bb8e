"""
Schemas module - stored entities and request payloads.
"""
from jobportal.schemas.schemas import (
    ApplicationCreate, ApplicationLetter, Company, CompanyCreate, CompanyUpdate,
    EducationHistory, EducationHistoryPayload, Job, JobApplication, JobCreate, JobUpdate,
    PostStatus, User, UserRegister, WorkHistory, WorkHistoryPayload
)

__all__ = [
    "ApplicationCreate", "ApplicationLetter", "Company", "CompanyCreate", "CompanyUpdate",
    "EducationHistory", "EducationHistoryPayload", "Job", "JobApplication", "JobCreate", "JobUpdate",
    "PostStatus", "User", "UserRegister", "WorkHistory", "WorkHistoryPayload"
]
