from typing import Literal

from pydantic import BaseModel, Field

from tradeslink.schemas.ledger import TransactionResponse
from tradeslink.schemas.profile import ContactPerson

Provision = Literal["yes", "no", "unspecified"]
JobStatus = Literal["Active", "Completed", "Closed"]


class JobDetails(BaseModel):
    project_name: str = Field(min_length=1)
    job_type: str = Field(min_length=1)
    project_description: str = ""
    city: str = ""
    country: str = ""
    start_date: str = ""
    end_date: str = ""
    work_days: list[str] = Field(default_factory=list)
    work_hours_per_week: str = ""
    number_of_employees: int = 1
    communication_language: str = ""
    other_language: str | None = None
    language_proficient_employees: int = 0
    min_language_level: str = ""
    tools_provided: Provision = "unspecified"
    materials_provided: Provision = "unspecified"
    accommodation_provided: Provision = "unspecified"
    invoicing_terms: str | None = None
    hourly_rate_from: str = "0"
    hourly_rate_to: str = "0"
    preferred_contractor_country: list[str] = Field(default_factory=list)
    other_preferred_contractor_country: str | None = None
    additional_comments: str | None = None
    photos: list[str] = Field(default_factory=list)


class JobBudget(BaseModel):
    type: Literal["fixed", "range"]
    amount: float | None = None
    min_amount: float | None = None
    max_amount: float | None = None


class PostedBy(BaseModel):
    id: str
    company: str | None


class UnlockRecord(BaseModel):
    contractor_id: str
    contractor_name: str
    contractor_country_code: str
    unlocked_at: str


class JobCreate(BaseModel):
    client_id: str
    details: JobDetails


class JobResponse(BaseModel):
    id: str
    title: str
    category: str
    budget: JobBudget
    city: str | None
    country: str | None
    start_date: str | None
    duration_days: int
    created_at: str
    posted_by: PostedBy
    status: str
    views: int
    applications: int
    details: JobDetails
    photos: list[str] = []
    unlocked_by: list[UnlockRecord] = []
    applied_by: list[str] = []


class JobListResponse(BaseModel):
    jobs: list[JobResponse]
    total: int


class PostJobResponse(BaseModel):
    job: JobResponse
    balance_credits: int
    transaction: TransactionResponse


class JobStatusUpdate(BaseModel):
    client_id: str
    status: JobStatus


class UnlockRequest(BaseModel):
    contractor_id: str


class UnlockResponse(BaseModel):
    job_id: str
    unlock: UnlockRecord
    balance_credits: int
    charged: bool


class JobContactResponse(BaseModel):
    job_id: str
    company: str | None
    contact_person: ContactPerson | None


class PairStateResponse(BaseModel):
    job_id: str
    contractor_id: str
    unlocked: bool
    applied: bool
