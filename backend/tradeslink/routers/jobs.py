from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tradeslink.database import get_db
from tradeslink.dependencies import ensure_same_account, require_session
from tradeslink.errors import NotJobOwner
from tradeslink.models.application import Application
from tradeslink.models.job import Job, JobUnlock
from tradeslink.routers.accounts import _tx_to_response
from tradeslink.schemas.application import ApplicationCreate, ApplicationResponse, ContractorSummary
from tradeslink.schemas.job import (
    JobBudget,
    JobContactResponse,
    JobCreate,
    JobDetails,
    JobListResponse,
    JobResponse,
    JobStatusUpdate,
    PairStateResponse,
    PostedBy,
    PostJobResponse,
    UnlockRecord,
    UnlockRequest,
    UnlockResponse,
)
from tradeslink.services import job_service, registry_service
from tradeslink.services.ledger_service import ledger_service

router = APIRouter(prefix="/jobs", tags=["jobs"])


def _unlock_to_record(unlock: JobUnlock) -> UnlockRecord:
    return UnlockRecord(
        contractor_id=unlock.contractor_id,
        contractor_name=unlock.contractor_name,
        contractor_country_code=unlock.contractor_country_code,
        unlocked_at=unlock.unlocked_at,
    )


def _job_to_response(job: Job) -> JobResponse:
    if job.budget_type == "fixed":
        budget = JobBudget(type="fixed", amount=job.budget_amount)
    else:
        budget = JobBudget(type="range", min_amount=job.budget_min, max_amount=job.budget_max)

    return JobResponse(
        id=job.id,
        title=job.title,
        category=job.category,
        budget=budget,
        city=job.city,
        country=job.country,
        start_date=job.start_date,
        duration_days=job.duration_days,
        created_at=job.created_at,
        posted_by=PostedBy(id=job.posted_by_id, company=job.posted_by_company),
        status=job.status,
        views=job.views,
        applications=job.applications,
        details=JobDetails.model_validate(job.details),
        photos=job.photos or [],
        unlocked_by=[_unlock_to_record(u) for u in job.unlocks],
        applied_by=registry_service.applied_contractor_ids(job),
    )


def _application_to_response(app: Application) -> ApplicationResponse:
    contractor = app.contractor
    return ApplicationResponse(
        id=app.id,
        job_id=app.job_id,
        contractor=ContractorSummary(
            id=contractor.id,
            name=contractor.name,
            company_name=contractor.company_name,
            avatar=contractor.avatar,
            skills=contractor.skills or [],
            rating=contractor.rating,
        ),
        message=app.message,
        date_applied=app.date_applied,
    )


@router.get("", response_model=JobListResponse)
async def list_jobs(
    status: str | None = None,
    category: str | None = None,
    country: str | None = None,
    posted_by: str | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    jobs = job_service.list_jobs(db, status=status, category=category, country=country, posted_by=posted_by)
    window = jobs[(page - 1) * per_page:page * per_page]
    return JobListResponse(jobs=[_job_to_response(j) for j in window], total=len(jobs))


@router.post("", response_model=PostJobResponse, status_code=201)
async def post_job(
    req: JobCreate,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    ensure_same_account(session_account_id, req.client_id)
    job, client, tx = ledger_service.post_job(db, req.client_id, req.details)
    return PostJobResponse(
        job=_job_to_response(job),
        balance_credits=client.balance_credits,
        transaction=_tx_to_response(tx),
    )


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, db: Session = Depends(get_db)):
    return _job_to_response(job_service.get_job(db, job_id))


@router.put("/{job_id}/status", response_model=JobResponse)
async def update_job_status(
    job_id: str,
    req: JobStatusUpdate,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    ensure_same_account(session_account_id, req.client_id)
    return _job_to_response(job_service.update_status(db, job_id, req.client_id, req.status))


@router.delete("/{job_id}")
async def delete_job(
    job_id: str,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    job_service.delete_job(db, job_id, session_account_id)
    return {"message": "Job deleted"}


@router.post("/{job_id}/views", response_model=JobResponse)
async def record_job_view(job_id: str, db: Session = Depends(get_db)):
    return _job_to_response(job_service.record_view(db, job_id))


@router.post("/{job_id}/unlock", response_model=UnlockResponse)
async def unlock_contact(
    job_id: str,
    req: UnlockRequest,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    ensure_same_account(session_account_id, req.contractor_id)
    job, contractor, unlock, charged = ledger_service.unlock_contact(db, job_id, req.contractor_id)
    return UnlockResponse(
        job_id=job.id,
        unlock=_unlock_to_record(unlock),
        balance_credits=contractor.balance_credits,
        charged=charged,
    )


@router.get("/{job_id}/contact", response_model=JobContactResponse)
async def get_job_contact(
    job_id: str,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    job, contact = job_service.get_contact(db, job_id, session_account_id)
    return JobContactResponse(job_id=job.id, company=job.posted_by_company, contact_person=contact)


@router.get("/{job_id}/state", response_model=PairStateResponse)
async def get_pair_state(job_id: str, contractor_id: str, db: Session = Depends(get_db)):
    state = registry_service.get_state(db, job_id, contractor_id)
    return PairStateResponse(job_id=job_id, contractor_id=contractor_id, **state)


@router.post("/{job_id}/applications", response_model=ApplicationResponse, status_code=201)
async def apply_to_job(
    job_id: str,
    req: ApplicationCreate,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    ensure_same_account(session_account_id, req.contractor_id)
    application = registry_service.apply(db, job_id, req.contractor_id, req.message)
    return _application_to_response(application)


@router.get("/{job_id}/applications", response_model=list[ApplicationResponse])
async def list_applications(
    job_id: str,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    job = job_service.get_job(db, job_id)
    if job.posted_by_id != session_account_id:
        raise NotJobOwner(job_id)
    return [_application_to_response(a) for a in registry_service.list_job_applications(db, job_id)]
