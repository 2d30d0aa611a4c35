from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tradeslink.database import get_db
from tradeslink.dependencies import ensure_same_account, require_session
from tradeslink.routers.jobs import _job_to_response
from tradeslink.schemas.application import ApplicationCountResponse
from tradeslink.schemas.job import JobResponse
from tradeslink.services import registry_service

router = APIRouter(prefix="/contractors/{contractor_id}", tags=["contractors"])


@router.get("/unlocked-jobs", response_model=list[JobResponse])
async def list_unlocked_jobs(
    contractor_id: str,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    ensure_same_account(session_account_id, contractor_id)
    return [_job_to_response(j) for j in registry_service.list_unlocked_jobs(db, contractor_id)]


@router.get("/applications/count", response_model=ApplicationCountResponse)
async def count_applications(
    contractor_id: str,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    ensure_same_account(session_account_id, contractor_id)
    count = registry_service.count_contractor_applications(db, contractor_id)
    return ApplicationCountResponse(contractor_id=contractor_id, count=count)
