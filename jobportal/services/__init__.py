"""
Services module - entity managers wired onto one StoreSet.

Usage:
    services = PortalServices.from_stores(memory_stores())
    ctx = IdentityContext.open("alice")
    result = services.users.register(ctx, {"fullName": "Alice", ...})
"""

from dataclasses import dataclass
from typing import Optional

from jobportal.core.config import Settings
from jobportal.db.stores import StoreSet, build_stores
from jobportal.services.application_service import JobApplicationManager
from jobportal.services.base import IdFactory
from jobportal.services.company_service import CompanyManager
from jobportal.services.history_service import EducationHistoryManager, WorkHistoryManager
from jobportal.services.job_service import JobManager
from jobportal.services.user_service import UserManager


@dataclass
class PortalServices:
    stores: StoreSet
    users: UserManager
    education: EducationHistoryManager
    work: WorkHistoryManager
    companies: CompanyManager
    jobs: JobManager
    applications: JobApplicationManager

    @classmethod
    def from_stores(cls, stores: StoreSet, id_factory: Optional[IdFactory] = None) -> "PortalServices":
        return cls(
            stores=stores,
            users=UserManager(stores.users, id_factory),
            education=EducationHistoryManager(stores.education, stores.users, id_factory),
            work=WorkHistoryManager(stores.work, stores.users, id_factory),
            companies=CompanyManager(stores.companies, stores.jobs, id_factory),
            jobs=JobManager(stores.jobs, stores.companies, id_factory),
            applications=JobApplicationManager(stores.applications, stores.jobs, stores.users, id_factory),
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PortalServices":
        return cls.from_stores(build_stores(settings))


__all__ = [
    "PortalServices",
    "UserManager",
    "EducationHistoryManager",
    "WorkHistoryManager",
    "CompanyManager",
    "JobManager",
    "JobApplicationManager"
]
