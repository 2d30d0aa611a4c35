from sqlalchemy import JSON, Column, Float, Integer, Text
from sqlalchemy.orm import relationship
from tradeslink.database import Base


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Text, primary_key=True)
    role = Column(Text, nullable=False)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    avatar = Column(Text)
    company_name = Column(Text)
    balance_credits = Column(Integer, nullable=False, default=0)
    skills = Column(JSON, nullable=False, default=list)
    rating = Column(Float, nullable=False, default=0)
    password_hash = Column(Text)
    created_at = Column(Text, nullable=False)

    profile = relationship("Profile", back_populates="account", uselist=False, cascade="all, delete-orphan")
    transactions = relationship("Transaction", back_populates="account", cascade="all, delete-orphan")
