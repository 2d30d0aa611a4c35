from typing import Annotated

from fastapi import APIRouter, Body, Depends, Header, HTTPException
from sqlalchemy.orm import Session

from tradeslink.database import get_db
from tradeslink.dependencies import ensure_same_account, require_session
from tradeslink.models.account import Account
from tradeslink.models.transaction import Transaction
from tradeslink.schemas.account import AccountResponse, LoginRequest, LoginResponse, SignUpRequest
from tradeslink.schemas.ledger import TransactionResponse
from tradeslink.services.account_service import account_service
from tradeslink.services.ledger_service import ledger_service

router = APIRouter(prefix="/accounts", tags=["accounts"])


def _account_to_response(account: Account) -> AccountResponse:
    return AccountResponse(
        id=account.id,
        role=account.role,
        name=account.name,
        email=account.email,
        avatar=account.avatar,
        company_name=account.company_name,
        balance_credits=account.balance_credits,
        skills=account.skills or [],
        rating=account.rating,
        created_at=account.created_at,
    )


def _tx_to_response(tx: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=tx.id,
        date=tx.date,
        description=tx.description,
        amount=tx.amount,
        status=tx.status,
        invoice_url=tx.invoice_url,
    )


@router.post("/signup", response_model=AccountResponse, status_code=201)
async def sign_up(req: Annotated[SignUpRequest, Body(discriminator="role")], db: Session = Depends(get_db)):
    account = account_service.sign_up(db, req.role, req.profile, req.email, req.password)
    return _account_to_response(account)


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: str,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    ensure_same_account(session_account_id, account_id)
    return _account_to_response(account_service.get_account(db, account_id))


@router.get("/{account_id}/transactions", response_model=list[TransactionResponse])
async def list_transactions(
    account_id: str,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    ensure_same_account(session_account_id, account_id)
    return [_tx_to_response(tx) for tx in ledger_service.list_transactions(db, account_id)]


# Session endpoints
auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/login", response_model=LoginResponse)
async def login(req: LoginRequest, db: Session = Depends(get_db)):
    result = account_service.login(db, req.email, req.password)
    if result is None:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return LoginResponse(**result)


@auth_router.post("/logout")
async def logout(
    authorization: str = Header(...),
    _account_id: str = Depends(require_session),
):
    account_service.logout(authorization[7:])
    return {"message": "Logged out"}
