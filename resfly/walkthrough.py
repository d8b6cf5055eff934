"""
End-to-end tour of the API.

Runs: create company → rename → create job → publish → list jobs/candidates
→ close → delete → suspend company → error check on an empty company.
"""
from __future__ import annotations

from typing import Any

from resfly.api import ResflyApi
from resfly.log import get_logger
from resfly.resources import Company, CompanyType, Job, JobCategory, JobType, Salary, SalaryType

log = get_logger(__name__)


def run(api: ResflyApi) -> dict[str, Any]:
    result: dict[str, Any] = {
        "company_id": None,
        "job_id": None,
        "job_status": None,
        "company_jobs": [],
        "candidates": [],
        "job_deleted": False,
        "company_suspended": False,
        "errors": [],
    }

    # 1. Company
    company = Company(api)
    (company.set_name("ACME, Inc.")
            .set_type(CompanyType.INTERNAL)
            .set_url("http://www.acmeinc.com")
            .set_job_slots(5))
    if not company.save():
        log.error("Could not create company: %s", api.get_errors())
        result["errors"] = api.get_errors()
        return result
    log.info("Created company %s at %s", company.id, company.date_created)
    result["company_id"] = company.id

    company.set_name("ACME International, Inc.")
    if company.save():
        log.info("Renamed company to %s", company.name)

    # 2. Job
    job = Job(api)
    (job.set_company_id(company.id)
        .set_title("Marketing Specialist")
        .set_city("Minneapolis")
        .set_state("MN")
        .set_category(JobCategory.MARKETING_PUBLIC_RELATIONS)
        .set_description("This a test description.")
        .set_type(JobType.FULL_TIME)
        .set_salary(Salary(amount=50000, type=SalaryType.YEARLY)))
    if job.save():
        log.info("Created job %s at %s", job.id, job.date_created)
        result["job_id"] = job.id

        if job.publish():
            log.info("Job status: %s", job.status)

        result["company_jobs"] = [j.title for j in company.get_jobs()]
        result["candidates"] = [c.full_name for c in job.get_candidates()]
        log.info("Company has %d job(s); job has %d candidate(s)",
                 len(result["company_jobs"]), len(result["candidates"]))

        if job.close():
            log.info("Job status: %s", job.status)
        result["job_status"] = job.status
        result["job_deleted"] = job.delete()

    # 3. Suspending also closes all published jobs
    result["company_suspended"] = company.suspend()

    # 4. Error checking
    empty = Company(api)
    if not empty.save():
        for error in api.get_errors():
            log.info("API error: %s", error)
    result["errors"] = api.get_errors()
    return result
