import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import func, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tradeslink.errors import AlreadyApplied, ContactNotUnlocked
from tradeslink.models.application import Application
from tradeslink.models.job import Job, JobUnlock
from tradeslink.services import job_service
from tradeslink.services.account_service import account_service

logger = logging.getLogger(__name__)


def has_unlocked(db: Session, job_id: str, contractor_id: str) -> bool:
    return db.get(JobUnlock, (job_id, contractor_id)) is not None


def has_applied(db: Session, job_id: str, contractor_id: str) -> bool:
    return (
        db.query(Application.id)
        .filter(Application.job_id == job_id, Application.contractor_id == contractor_id)
        .first()
        is not None
    )


def get_state(db: Session, job_id: str, contractor_id: str) -> dict:
    job_service.get_job(db, job_id)
    return {
        "unlocked": has_unlocked(db, job_id, contractor_id),
        "applied": has_applied(db, job_id, contractor_id),
    }


def apply(db: Session, job_id: str, contractor_id: str, message: str) -> Application:
    """Submit a contractor's application. Requires a prior unlock; one per job."""
    job = job_service.get_job(db, job_id)
    contractor = account_service.get_contractor(db, contractor_id)

    if not has_unlocked(db, job.id, contractor.id):
        raise ContactNotUnlocked(job_id)
    if has_applied(db, job.id, contractor.id):
        raise AlreadyApplied(job_id)

    application = Application(
        id=str(uuid.uuid4()),
        job_id=job.id,
        contractor_id=contractor.id,
        message=message,
        date_applied=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
    )
    db.add(application)
    db.execute(
        text("UPDATE jobs SET applications = applications + 1 WHERE id = :id"),
        {"id": job.id},
    )
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise AlreadyApplied(job_id)

    db.refresh(application)
    logger.info("Contractor %s applied to job %s", contractor.id, job.id)
    return application


def applied_contractor_ids(job: Job) -> list[str]:
    return [a.contractor_id for a in job.application_records]


def list_job_applications(db: Session, job_id: str) -> list[Application]:
    job_service.get_job(db, job_id)
    return (
        db.query(Application)
        .filter(Application.job_id == job_id)
        .order_by(Application.date_applied.desc())
        .all()
    )


def list_unlocked_jobs(db: Session, contractor_id: str) -> list[Job]:
    account_service.get_contractor(db, contractor_id)
    return (
        db.query(Job)
        .join(JobUnlock, JobUnlock.job_id == Job.id)
        .filter(JobUnlock.contractor_id == contractor_id)
        .order_by(JobUnlock.unlocked_at.desc())
        .all()
    )


def count_contractor_applications(db: Session, contractor_id: str) -> int:
    account_service.get_contractor(db, contractor_id)
    return (
        db.query(func.count(Application.id))
        .filter(Application.contractor_id == contractor_id)
        .scalar()
    )
