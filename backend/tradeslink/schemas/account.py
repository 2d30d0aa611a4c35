from typing import Literal

from pydantic import BaseModel, Field, field_validator

from tradeslink.schemas.profile import CompanyProfile, ContractorProfile


class _SignUpBase(BaseModel):
    email: str
    password: str | None = Field(default=None, min_length=8)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if "@" not in value or value.startswith("@") or value.endswith("@"):
            raise ValueError("email must be a valid address")
        return value


class ClientSignUpRequest(_SignUpBase):
    role: Literal["client"]
    profile: CompanyProfile


class ContractorSignUpRequest(_SignUpBase):
    role: Literal["contractor"]
    profile: ContractorProfile


SignUpRequest = ClientSignUpRequest | ContractorSignUpRequest


class AccountResponse(BaseModel):
    id: str
    role: str
    name: str
    email: str
    avatar: str | None
    company_name: str | None
    balance_credits: int
    skills: list[str] = []
    rating: float = 0
    created_at: str


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    token: str
    account_id: str
    expires_in_seconds: int
