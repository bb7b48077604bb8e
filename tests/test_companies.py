import logging

from jobportal.core.errors import ErrorKind

from conftest import COMPANY_PAYLOAD, JOB_PAYLOAD


def test_register_company_sets_admin_to_caller(services, ctx):
    caller = ctx("acme-admin")

    company = services.companies.register(caller, COMPANY_PAYLOAD).unwrap()

    assert company.admin == "acme-admin"
    assert company.created_at == caller.now()
    assert services.companies.get(ctx("anyone"), company.id).unwrap() == company


def test_register_company_rejects_empty_field(services, ctx):
    result = services.companies.register(ctx("acme-admin"), {**COMPANY_PAYLOAD, "address": ""})

    assert result.error.kind == ErrorKind.validation_failed
    assert services.stores.companies.values() == []


def test_register_company_accepts_free_form_email(services, ctx):
    company = services.companies.register(ctx("acme-admin"), {**COMPANY_PAYLOAD, "email": "hr desk"}).unwrap()

    assert company.email == "hr desk"

    updated = services.companies.update(ctx("acme-admin"), company.id, {"email": "front office"}).unwrap()
    assert updated.email == "front office"


def test_register_company_ignores_admin_in_payload(services, ctx):
    company = services.companies.register(
        ctx("acme-admin"), {**COMPANY_PAYLOAD, "admin": "someone-else"}
    ).unwrap()

    assert company.admin == "acme-admin"


def test_update_company_merges_given_fields(services, ctx, company):
    updated = services.companies.update(
        ctx("acme-admin"), company.id, {"description": "Makes rockets"}
    ).unwrap()

    assert updated.description == "Makes rockets"
    assert updated.name == company.name
    assert (updated.admin, updated.created_at) == (company.admin, company.created_at)


def test_update_company_requires_admin(services, ctx, company):
    result = services.companies.update(ctx("mallory"), company.id, {"name": "Hijacked"})

    assert result.error.kind == ErrorKind.not_authorized
    assert services.stores.companies.get(company.id) == company


def test_update_company_missing(services, ctx):
    result = services.companies.update(ctx("acme-admin"), "missing", {"name": "X"})

    assert result.error.kind == ErrorKind.not_found


def test_update_company_with_no_fields(services, ctx, company):
    result = services.companies.update(ctx("acme-admin"), company.id, {})

    assert result.error.kind == ErrorKind.validation_failed


def test_remove_company_refused_while_jobs_exist(services, ctx, company, job):
    result = services.companies.remove(ctx("acme-admin"), company.id)

    assert result.error.kind == ErrorKind.conflict
    assert result.error.detail == "Company still has jobs"
    assert services.stores.companies.get(company.id) == company


def test_remove_company_refused_even_for_closed_jobs(services, ctx, company, job):
    services.jobs.close(ctx("acme-admin"), job.id).unwrap()

    assert services.companies.remove(ctx("acme-admin"), company.id).error.kind == ErrorKind.conflict


def test_remove_company_succeeds_once_jobs_are_removed(services, ctx, company, job):
    second = services.jobs.create(ctx("acme-admin"), JOB_PAYLOAD).unwrap()
    services.jobs.remove(ctx("acme-admin"), job.id).unwrap()
    assert services.companies.remove(ctx("acme-admin"), company.id).error.kind == ErrorKind.conflict

    services.jobs.remove(ctx("acme-admin"), second.id).unwrap()

    assert services.companies.remove(ctx("acme-admin"), company.id).unwrap() == company
    assert services.stores.companies.get(company.id) is None


def test_remove_company_authorization_checked_before_jobs(services, ctx, company, job):
    result = services.companies.remove(ctx("mallory"), company.id)

    assert result.error.kind == ErrorKind.not_authorized


def test_list_mine(services, ctx, company):
    other = services.companies.register(ctx("globex-admin"), {**COMPANY_PAYLOAD, "name": "Globex"}).unwrap()

    assert services.companies.list_mine(ctx("acme-admin")).unwrap() == [company]
    assert services.companies.list_mine(ctx("globex-admin")).unwrap() == [other]
    assert services.companies.get(ctx("x"), "missing").error.kind == ErrorKind.not_found


def test_company_mutations_log_identity(services, ctx, company, caplog):
    with caplog.at_level(logging.INFO, logger="jobportal.services.company_service"):
        services.companies.update(ctx("acme-admin"), company.id, {"phone": "555"}).unwrap()
        services.companies.remove(ctx("acme-admin"), company.id).unwrap()

    assert f"Updated company {company.id} for acme-admin" in caplog.messages
    assert f"Removed company {company.id} for acme-admin" in caplog.messages
