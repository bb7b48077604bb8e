"""End-to-end flows across managers, mirroring how a client drives the portal."""

import pytest

from jobportal.core.errors import ErrorKind
from jobportal.schemas.schemas import PostStatus

from conftest import APPLICATION_LETTER, COMPANY_PAYLOAD, JOB_PAYLOAD, USER_PAYLOAD


def test_close_then_apply_is_refused(services, ctx):
    company = services.companies.register(ctx("A"), COMPANY_PAYLOAD).unwrap()
    job = services.jobs.create(ctx("A"), JOB_PAYLOAD).unwrap()
    assert job.company_id == company.id

    assert services.jobs.close(ctx("A"), job.id).unwrap().post_status == PostStatus.closed
    assert services.jobs.close(ctx("A"), job.id).is_ok

    services.users.register(ctx("U"), USER_PAYLOAD).unwrap()
    result = services.applications.apply(ctx("U"), {"jobId": job.id, **APPLICATION_LETTER})
    assert result.error.kind == ErrorKind.conflict
    assert result.error.detail == "Job is closed"


def test_unregistered_applicant_stores_nothing(services, ctx):
    services.companies.register(ctx("A"), COMPANY_PAYLOAD).unwrap()
    job = services.jobs.create(ctx("A"), JOB_PAYLOAD).unwrap()

    result = services.applications.apply(ctx("U"), {"jobId": job.id, **APPLICATION_LETTER})

    assert result.error.kind == ErrorKind.not_authorized
    assert services.stores.applications.values() == []


@pytest.mark.parametrize("operation", ["update", "remove"])
def test_ownership_is_enforced_for_every_owned_entity(services, ctx, operation):
    owner, intruder = ctx("owner"), ctx("intruder")
    services.users.register(owner, USER_PAYLOAD).unwrap()
    services.users.register(intruder, {**USER_PAYLOAD, "email": "eve@example.com"}).unwrap()

    education = services.education.add(owner, {
        "educationLevel": "MSc", "institution": "U", "fieldOfStudy": "Math",
        "yearOfEntry": 2010, "yearOfGraduation": 2012, "gpa": 3.0,
    }).unwrap()
    work = services.work.add(owner, {
        "companyName": "X", "position": "Dev", "yearStarted": 2012,
        "yearEnded": 2015, "salary": "1", "description": "d",
    }).unwrap()
    company = services.companies.register(owner, COMPANY_PAYLOAD).unwrap()
    job = services.jobs.create(owner, JOB_PAYLOAD).unwrap()

    cases = [
        (services.education, services.stores.education, education, {
            "educationLevel": "PhD", "institution": "U", "fieldOfStudy": "Math",
            "yearOfEntry": 2012, "yearOfGraduation": 2016, "gpa": 4.0,
        }),
        (services.work, services.stores.work, work, {
            "companyName": "Y", "position": "Lead", "yearStarted": 2015,
            "yearEnded": 2018, "salary": "2", "description": "e",
        }),
        (services.companies, services.stores.companies, company, {"name": "Taken"}),
        (services.jobs, services.stores.jobs, job, {"position": "Taken"}),
    ]
    for manager, store, record, update_payload in cases:
        if operation == "update":
            result = manager.update(intruder, record.id, update_payload)
        else:
            result = manager.remove(intruder, record.id)

        assert result.error.kind == ErrorKind.not_authorized, manager
        assert store.get(record.id) == record
