from pydantic import BaseModel


class ApplicationCreate(BaseModel):
    contractor_id: str
    message: str = ""


class ContractorSummary(BaseModel):
    id: str
    name: str
    company_name: str | None
    avatar: str | None
    skills: list[str] = []
    rating: float = 0


class ApplicationResponse(BaseModel):
    id: str
    job_id: str
    contractor: ContractorSummary
    message: str
    date_applied: str


class ApplicationCountResponse(BaseModel):
    contractor_id: str
    count: int
