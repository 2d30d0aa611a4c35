from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tradeslink.database import get_db
from tradeslink.dependencies import ensure_same_account, require_session
from tradeslink.models.profile import Profile
from tradeslink.schemas.profile import (
    CompanyProfile,
    CompanyProfileResponse,
    ContractorProfile,
    ContractorProfileResponse,
)
from tradeslink.services.account_service import account_service

router = APIRouter(tags=["profiles"])


def _company_to_response(row: Profile) -> CompanyProfileResponse:
    return CompanyProfileResponse(
        id=row.id,
        views=row.views,
        updated_at=row.updated_at,
        profile=CompanyProfile.model_validate(row.data),
    )


def _contractor_to_response(row: Profile) -> ContractorProfileResponse:
    return ContractorProfileResponse(
        id=row.id,
        views=row.views,
        rating=row.account.rating,
        updated_at=row.updated_at,
        profile=ContractorProfile.model_validate(row.data),
    )


# Company (client) profiles

@router.get("/clients/{client_id}/profile", response_model=CompanyProfileResponse)
async def get_company_profile(client_id: str, db: Session = Depends(get_db)):
    return _company_to_response(account_service.get_profile(db, client_id, "client"))


@router.put("/clients/{client_id}/profile", response_model=CompanyProfileResponse)
async def update_company_profile(
    client_id: str,
    req: CompanyProfile,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    ensure_same_account(session_account_id, client_id)
    return _company_to_response(account_service.update_profile(db, client_id, req))


# Contractor profiles

@router.get("/contractors/{contractor_id}/profile", response_model=ContractorProfileResponse)
async def get_contractor_profile(contractor_id: str, db: Session = Depends(get_db)):
    return _contractor_to_response(account_service.get_profile(db, contractor_id, "contractor"))


@router.put("/contractors/{contractor_id}/profile", response_model=ContractorProfileResponse)
async def update_contractor_profile(
    contractor_id: str,
    req: ContractorProfile,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    ensure_same_account(session_account_id, contractor_id)
    return _contractor_to_response(account_service.update_profile(db, contractor_id, req))


@router.post("/contractors/{contractor_id}/profile/views", response_model=ContractorProfileResponse)
async def record_contractor_profile_view(contractor_id: str, db: Session = Depends(get_db)):
    return _contractor_to_response(account_service.record_profile_view(db, contractor_id))
