from sqlalchemy import JSON, Column, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from tradeslink.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    budget_type = Column(Text, nullable=False, default="range")
    budget_amount = Column(Float)
    budget_min = Column(Float)
    budget_max = Column(Float)
    city = Column(Text)
    country = Column(Text)
    start_date = Column(Text)
    duration_days = Column(Integer, nullable=False, default=0)
    created_at = Column(Text, nullable=False)
    posted_by_id = Column(Text, ForeignKey("accounts.id"), nullable=False)
    posted_by_company = Column(Text)
    status = Column(Text, nullable=False, default="Active")
    views = Column(Integer, nullable=False, default=0)
    applications = Column(Integer, nullable=False, default=0)
    details = Column(JSON, nullable=False)
    photos = Column(JSON, nullable=False, default=list)

    unlocks = relationship(
        "JobUnlock", back_populates="job", cascade="all, delete-orphan",
        order_by="JobUnlock.unlocked_at",
    )
    application_records = relationship(
        "Application", back_populates="job", cascade="all, delete-orphan",
        order_by="Application.date_applied",
    )


class JobUnlock(Base):
    __tablename__ = "job_unlocks"

    job_id = Column(Text, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True)
    contractor_id = Column(Text, ForeignKey("accounts.id", ondelete="CASCADE"), primary_key=True)
    contractor_name = Column(Text, nullable=False)
    contractor_country_code = Column(Text, nullable=False)
    unlocked_at = Column(Text, nullable=False)

    job = relationship("Job", back_populates="unlocks")
