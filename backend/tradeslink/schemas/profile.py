from typing import Literal

from pydantic import BaseModel, Field


class Address(BaseModel):
    street: str = ""
    zip: str = ""
    city: str = ""
    country: str = ""


class ContactPerson(BaseModel):
    full_name: str
    role: str = ""
    phone: str = ""
    email: str = ""
    show_email_publicly: bool = False
    show_phone_publicly: bool = False


class PortfolioItem(BaseModel):
    id: str
    title: str
    description: str = ""
    location: str = ""
    date_completed: str | None = None
    project_size: str | None = None
    images: list[str] = Field(default_factory=list)


class ContractorPortfolioProject(BaseModel):
    id: str
    title: str
    description: str = ""
    location: str = ""
    date_start: str | None = None
    date_end: str | None = None
    project_value: float = 0
    currency: str = "EUR"
    images: list[str] = Field(default_factory=list)


class LanguageSkill(BaseModel):
    language: str
    proficiency: str


class CompanyProfile(BaseModel):
    company_name: str = Field(min_length=1)
    trading_name: str | None = None
    company_type: str = ""
    vat_id: str | None = None
    description: str | None = None
    slogan: str | None = None
    contact_person: ContactPerson
    website: str | None = None
    linkedin: str | None = None
    address: Address = Field(default_factory=Address)
    operational_countries: list[str] = Field(default_factory=list)
    service_categories: list[str] = Field(default_factory=list)
    company_size: int = 0
    portfolio: list[PortfolioItem] = Field(default_factory=list)
    status: Literal["published", "draft"] = "draft"
    cover_image_url: str | None = None
    logo_url: str | None = None


class ContractorProfile(BaseModel):
    company_name: str = Field(min_length=1)
    trading_name: str | None = None
    company_type: str = ""
    vat_id: str | None = None
    slogan: str | None = None
    description: str | None = None
    address: Address = Field(default_factory=Address)
    contact_person: ContactPerson
    website: str | None = None
    linkedin: str | None = None
    portfolio: list[ContractorPortfolioProject] = Field(default_factory=list)
    cover_image_url: str | None = None
    logo_url: str | None = None
    service_categories: list[str] = Field(default_factory=list)
    company_size: int = 0
    skills: list[str] = Field(default_factory=list)
    languages: list[LanguageSkill] = Field(default_factory=list)
    experience_years: int = 0


class CompanyProfileResponse(BaseModel):
    id: str
    views: int
    updated_at: str
    profile: CompanyProfile


class ContractorProfileResponse(BaseModel):
    id: str
    views: int
    rating: float
    updated_at: str
    profile: ContractorProfile
