import os
import sys
from pathlib import Path

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import itertools

import pytest
from fastapi.testclient import TestClient

from jobportal.core.auth import create_access_token
from jobportal.core.context import IdentityContext, MonotonicClock
from jobportal.db.stores import memory_stores
from jobportal.main import create_app
from jobportal.services import PortalServices


USER_PAYLOAD = {"fullName": "Alice Doe", "email": "alice@example.com", "phone": "+1 555 0100"}

EDUCATION_PAYLOAD = {
    "educationLevel": "Bachelor",
    "institution": "State University",
    "fieldOfStudy": "Computer Science",
    "yearOfEntry": 2016,
    "yearOfGraduation": 2020,
    "gpa": 3.6,
    "description": "Graduated with honours",
}

WORK_PAYLOAD = {
    "companyName": "Initech",
    "position": "Backend Engineer",
    "yearStarted": 2020,
    "yearEnded": 2023,
    "salary": "90000 USD",
    "description": "Built billing services",
}

COMPANY_PAYLOAD = {
    "name": "Acme Corp",
    "email": "jobs@acme.example.com",
    "phone": "+1 555 0199",
    "address": "1 Main St, Springfield",
    "description": "Makes everything",
}

JOB_PAYLOAD = {
    "position": "Python Developer",
    "requirements": "3+ years Python",
    "location": "Remote",
    "salary": "100000 USD",
    "description": "Work on the hiring platform",
}

APPLICATION_LETTER = {
    "coverLetter": "I would love to join.",
    "resume": "https://example.com/alice.pdf",
}


@pytest.fixture
def clock():
    return MonotonicClock()


@pytest.fixture
def ctx(clock):
    """ctx("alice") opens a fresh IdentityContext for that caller."""
    def _open(identity: str) -> IdentityContext:
        return IdentityContext.open(identity, clock)
    return _open


@pytest.fixture
def services():
    counter = itertools.count(1)
    return PortalServices.from_stores(memory_stores(), id_factory=lambda: f"id-{next(counter):04d}")


@pytest.fixture
def seeker(services, ctx):
    """Identity 'alice', registered as a user."""
    services.users.register(ctx("alice"), USER_PAYLOAD).unwrap()
    return "alice"


@pytest.fixture
def company(services, ctx):
    """Company administered by 'acme-admin'."""
    return services.companies.register(ctx("acme-admin"), COMPANY_PAYLOAD).unwrap()


@pytest.fixture
def job(services, ctx, company):
    """Open job posted by 'acme-admin' under `company`."""
    return services.jobs.create(ctx("acme-admin"), JOB_PAYLOAD).unwrap()


@pytest.fixture
def client(services):
    with TestClient(create_app(services)) as c:
        yield c


@pytest.fixture
def auth():
    """auth("alice") -> Authorization header for that identity."""
    def _headers(identity: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token(identity)}"}
    return _headers
