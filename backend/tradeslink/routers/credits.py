from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tradeslink.database import get_db
from tradeslink.dependencies import ensure_same_account, require_session
from tradeslink.routers.accounts import _account_to_response, _tx_to_response
from tradeslink.schemas.ledger import CreditPackage, PurchaseRequest, PurchaseResponse
from tradeslink.services.ledger_service import ledger_service

router = APIRouter(prefix="/credits", tags=["credits"])


@router.get("/packages", response_model=list[CreditPackage])
async def list_packages():
    return ledger_service.list_packages()


@router.post("/purchase", response_model=PurchaseResponse, status_code=201)
async def purchase_credits(
    req: PurchaseRequest,
    session_account_id: str = Depends(require_session),
    db: Session = Depends(get_db),
):
    ensure_same_account(session_account_id, req.account_id)
    account, tx = ledger_service.purchase_credits(db, req.account_id, req.package_id)
    return PurchaseResponse(account=_account_to_response(account), transaction=_tx_to_response(tx))
