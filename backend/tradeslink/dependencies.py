from fastapi import Header, HTTPException

from tradeslink.services.account_service import account_service


async def require_session(authorization: str = Header(...)) -> str:
    """Resolve the bearer token to the signed-in account id."""
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing bearer token")
    account_id = account_service.resolve_token(authorization[7:])
    if account_id is None:
        raise HTTPException(status_code=401, detail="Session expired or invalid")
    return account_id


def ensure_same_account(session_account_id: str, acting_account_id: str):
    if session_account_id != acting_account_id:
        raise HTTPException(status_code=403, detail="Session does not belong to this account")
