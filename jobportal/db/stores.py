"""
StoreSet - the six independently keyed maps the managers run on.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Type

from jobportal.core.config import Settings, get_settings
from jobportal.db.store import EntityStore, MemoryStore
from jobportal.schemas.schemas import (
    Company, EducationHistory, Job, JobApplication, User, WorkHistory
)


@dataclass
class StoreSet:
    users: EntityStore[User]
    education: EntityStore[EducationHistory]
    work: EntityStore[WorkHistory]
    companies: EntityStore[Company]
    jobs: EntityStore[Job]
    applications: EntityStore[JobApplication]


def _make_stores(factory: Callable[[str, Type], EntityStore]) -> StoreSet:
    return StoreSet(
        users=factory("users", User),
        education=factory("education_history", EducationHistory),
        work=factory("work_history", WorkHistory),
        companies=factory("companies", Company),
        jobs=factory("jobs", Job),
        applications=factory("job_applications", JobApplication),
    )


def memory_stores() -> StoreSet:
    return _make_stores(MemoryStore)


def build_stores(settings: Optional[Settings] = None) -> StoreSet:
    """Build the StoreSet for settings.storage_backend."""
    settings = settings or get_settings()
    backend = settings.storage_backend

    if backend == "memory":
        return memory_stores()
    if backend == "mongo":
        from jobportal.db.mongodb import MongoStore
        return _make_stores(MongoStore)
    if backend == "sql":
        from jobportal.db.postgres import SqlStore
        return _make_stores(SqlStore)
    raise ValueError(f"Unknown storage backend: {backend}")
