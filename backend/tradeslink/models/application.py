from sqlalchemy import Column, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from tradeslink.database import Base


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (UniqueConstraint("job_id", "contractor_id"),)

    id = Column(Text, primary_key=True)
    job_id = Column(Text, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)
    contractor_id = Column(Text, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False)
    message = Column(Text, nullable=False, default="")
    date_applied = Column(Text, nullable=False)

    job = relationship("Job", back_populates="application_records")
    contractor = relationship("Account")
