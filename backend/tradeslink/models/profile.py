from sqlalchemy import JSON, Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from tradeslink.database import Base


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Text, ForeignKey("accounts.id", ondelete="CASCADE"), primary_key=True)
    role = Column(Text, nullable=False)
    data = Column(JSON, nullable=False)
    views = Column(Integer, nullable=False, default=0)
    updated_at = Column(Text, nullable=False)

    account = relationship("Account", back_populates="profile")
