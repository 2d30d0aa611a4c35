import logging
import uuid
from datetime import date, datetime, timezone

from sqlalchemy.orm import Session

from tradeslink.config import settings
from tradeslink.errors import ContactNotUnlocked, JobNotFound, NotJobOwner
from tradeslink.models.account import Account
from tradeslink.models.job import Job, JobUnlock
from tradeslink.schemas.job import JobDetails
from tradeslink.utils.countries import resolve_country_code

logger = logging.getLogger(__name__)

JOB_STATUSES = {"Active", "Completed", "Closed"}


def _to_float(value: str | None) -> float | None:
    try:
        return float(value) if value not in (None, "") else None
    except ValueError:
        return None


def duration_in_days(start_date: str, end_date: str) -> int:
    try:
        days = (date.fromisoformat(end_date) - date.fromisoformat(start_date)).days
    except ValueError:
        return 0
    return max(days, 0)


def build_job(client: Account, details: JobDetails) -> Job:
    """Create an unsaved Job from a client's posting form."""
    return Job(
        id=str(uuid.uuid4()),
        title=details.project_name,
        category=details.job_type,
        budget_type="range",
        budget_min=_to_float(details.hourly_rate_from),
        budget_max=_to_float(details.hourly_rate_to),
        city=details.city,
        country=resolve_country_code(details.country) or settings.default_job_country_code,
        start_date=details.start_date or None,
        duration_days=duration_in_days(details.start_date, details.end_date),
        created_at=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
        posted_by_id=client.id,
        posted_by_company=client.company_name,
        status="Active",
        views=0,
        applications=0,
        details=details.model_dump(),
        photos=list(details.photos),
    )


def get_job(db: Session, job_id: str) -> Job:
    job = db.get(Job, job_id)
    if job is None:
        raise JobNotFound(job_id)
    return job


def list_jobs(
    db: Session,
    status: str | None = None,
    category: str | None = None,
    country: str | None = None,
    posted_by: str | None = None,
) -> list[Job]:
    query = db.query(Job)
    if status:
        query = query.filter(Job.status == status)
    if category:
        query = query.filter(Job.category == category)
    if country:
        query = query.filter(Job.country == country.upper())
    if posted_by:
        query = query.filter(Job.posted_by_id == posted_by)
    return query.order_by(Job.created_at.desc()).all()


def _get_owned_job(db: Session, job_id: str, client_id: str) -> Job:
    job = get_job(db, job_id)
    if job.posted_by_id != client_id:
        raise NotJobOwner(job_id)
    return job


def record_view(db: Session, job_id: str) -> Job:
    job = get_job(db, job_id)
    job.views = Job.views + 1
    db.commit()
    db.refresh(job)
    return job


def update_status(db: Session, job_id: str, client_id: str, status: str) -> Job:
    if status not in JOB_STATUSES:
        raise ValueError(f"status must be one of {sorted(JOB_STATUSES)}")
    job = _get_owned_job(db, job_id, client_id)
    job.status = status
    db.commit()
    db.refresh(job)
    logger.info("Job %s moved to %s", job_id, status)
    return job


def delete_job(db: Session, job_id: str, client_id: str):
    # Posting credits are not refunded.
    job = _get_owned_job(db, job_id, client_id)
    db.delete(job)
    db.commit()
    logger.info("Job %s deleted by %s", job_id, client_id)


def get_contact(db: Session, job_id: str, account_id: str) -> tuple[Job, dict | None]:
    """Return the poster's contact person if the caller owns or unlocked the job."""
    job = get_job(db, job_id)
    if job.posted_by_id != account_id and db.get(JobUnlock, (job_id, account_id)) is None:
        raise ContactNotUnlocked(job_id)

    poster = db.get(Account, job.posted_by_id)
    if poster is None or poster.profile is None:
        return job, None
    return job, poster.profile.data.get("contact_person")
