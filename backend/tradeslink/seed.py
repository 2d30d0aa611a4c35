import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from tradeslink.config import settings
from tradeslink.models.account import Account
from tradeslink.models.job import Job
from tradeslink.models.profile import Profile
from tradeslink.schemas.job import JobDetails
from tradeslink.schemas.profile import CompanyProfile, ContractorProfile
from tradeslink.services.job_service import duration_in_days
from tradeslink.utils.security import hash_password

logger = logging.getLogger(__name__)

DEMO_CLIENT_ID = "client-1"
DEMO_CONTRACTOR_ID = "contractor-1"

DEMO_COMPANY = CompanyProfile(
    company_name="West EU Construction GmbH",
    company_type="GmbH",
    vat_id="DE123456789",
    description="Leading construction company in Germany specializing in large residential and commercial projects.",
    slogan="Building the Future, Today.",
    contact_person={
        "full_name": "John Doe", "role": "Project Manager", "phone": "+49 123 4567890",
        "email": "j.doe@west-eu.com", "show_email_publicly": True, "show_phone_publicly": False,
    },
    address={"street": "Musterstrasse 1", "zip": "10115", "city": "Berlin", "country": "Germany"},
    operational_countries=["Germany", "Netherlands", "Austria"],
    service_categories=["Residential Construction", "Commercial Buildings"],
    company_size=150,
    status="published",
    logo_url="https://i.pravatar.cc/200?u=client-logo",
)

DEMO_CONTRACTOR = ContractorProfile(
    company_name="Ivan Petrov Construction",
    company_type="Sole Proprietor",
    description="A team of highly skilled builders from Poland, specializing in bricklaying and general construction.",
    slogan="Quality craftsmanship, delivered on time.",
    contact_person={
        "full_name": "Ivan Petrov", "role": "Owner", "phone": "+48 987 654 321",
        "email": "ivan.p@contractor.pl",
    },
    address={"street": "Kwiatowa 5", "zip": "00-001", "city": "Warsaw", "country": "Poland"},
    company_size=10,
    service_categories=["Bricklaying", "Masonry", "General Construction"],
    skills=["bricklayer", "concrete_worker"],
    languages=[{"language": "Polish", "proficiency": "Native"}, {"language": "German", "proficiency": "B1"}],
    experience_years=15,
    logo_url="https://i.pravatar.cc/200?u=contractor-logo",
)

# (id, title, category, budget, city, country code, country, start, end, created_at, views, hours/week, employees)
DEMO_JOBS = [
    ("job-1", "Bricklaying for new residential complex", "bricklayer", ("range", 28, 32),
     "Berlin", "DE", "Germany", "2024-08-01", "2024-10-30", "2024-05-20T10:00:00Z", 124, "45", 10),
    ("job-2", "Electrical installation in an office building", "electrician", ("range", 35, 40),
     "Amsterdam", "NL", "Netherlands", "2024-09-15", "2024-11-14", "2024-05-21T11:30:00Z", 88, "50", 8),
    ("job-3", "Plastering and Painting Works for Villa", "plasterer", ("fixed", 25000, None),
     "Munich", "DE", "Germany", "2024-07-20", "2024-08-19", "2024-05-19T09:00:00Z", 215, "40", 4),
    ("job-4", "Facade Insulation for Apartment Block", "insulation_installer", ("range", 25, 29),
     "Vienna", "AT", "Austria", "2024-08-10", "2024-10-24", "2024-05-22T08:00:00Z", 95, "45", 8),
    ("job-5", "HVAC Installation in a Shopping Mall", "hvac_engineer", ("range", 38, 45),
     "Brussels", "BE", "Belgium", "2024-10-01", "2025-01-29", "2024-05-22T09:15:00Z", 72, "40", 12),
    ("job-6", "Drywall Installation for Office Fit-out", "drywall_fitter", ("fixed", 50000, None),
     "Frankfurt", "DE", "Germany", "2024-08-05", "2024-09-19", "2024-05-23T14:00:00Z", 150, "48", 6),
]


def _demo_account(account_id: str, role: str, email: str, profile, now: str) -> Account:
    return Account(
        id=account_id,
        role=role,
        name=profile.contact_person.full_name,
        email=email,
        avatar=f"https://i.pravatar.cc/150?u={account_id}",
        company_name=profile.company_name,
        balance_credits=0,
        skills=list(getattr(profile, "skills", [])),
        rating=0,
        password_hash=hash_password(settings.demo_password),
        created_at=now,
    )


def seed_demo_data(db: Session) -> dict[str, int]:
    if db.get(Account, DEMO_CLIENT_ID) is not None:
        return {"accounts": 0, "jobs": 0}

    now = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    db.add(_demo_account(DEMO_CLIENT_ID, "client", "client@test.com", DEMO_COMPANY, now))
    db.add(_demo_account(DEMO_CONTRACTOR_ID, "contractor", "contractor@test.com", DEMO_CONTRACTOR, now))
    db.add(Profile(id=DEMO_CLIENT_ID, role="client", data=DEMO_COMPANY.model_dump(), views=0, updated_at=now))
    db.add(Profile(id=DEMO_CONTRACTOR_ID, role="contractor", data=DEMO_CONTRACTOR.model_dump(), views=0, updated_at=now))

    for (job_id, title, category, budget, city, code, country, start, end,
         created_at, views, hours, employees) in DEMO_JOBS:
        budget_type, first, second = budget
        rate_from, rate_to = (str(first), str(second)) if budget_type == "range" else ("0", "0")
        details = JobDetails(
            project_name=title, job_type=category, city=city, country=country,
            start_date=start, end_date=end, work_days=["Mon", "Tue", "Wed", "Thu", "Fri"],
            work_hours_per_week=hours, number_of_employees=employees,
            hourly_rate_from=rate_from, hourly_rate_to=rate_to,
        )
        db.add(Job(
            id=job_id,
            title=title,
            category=category,
            budget_type=budget_type,
            budget_amount=first if budget_type == "fixed" else None,
            budget_min=first if budget_type == "range" else None,
            budget_max=second if budget_type == "range" else None,
            city=city,
            country=code,
            start_date=start,
            duration_days=duration_in_days(start, end),
            created_at=created_at,
            posted_by_id=DEMO_CLIENT_ID,
            posted_by_company=DEMO_COMPANY.company_name,
            status="Active",
            views=views,
            applications=0,
            details=details.model_dump(),
            photos=[],
        ))

    db.commit()
    logger.info("Seeded demo data: 2 accounts, %d jobs", len(DEMO_JOBS))
    return {"accounts": 2, "jobs": len(DEMO_JOBS)}
