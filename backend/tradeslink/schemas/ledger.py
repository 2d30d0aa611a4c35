from pydantic import BaseModel

from tradeslink.schemas.account import AccountResponse


class CreditPackage(BaseModel):
    id: str
    name: str
    credits: int
    price: float
    price_per_credit: float
    popular: bool
    economy: str | None = None


class PurchaseRequest(BaseModel):
    account_id: str
    package_id: str


class TransactionResponse(BaseModel):
    id: str
    date: str
    description: str
    amount: float
    status: str
    invoice_url: str | None


class PurchaseResponse(BaseModel):
    account: AccountResponse
    transaction: TransactionResponse
