from sqlalchemy import Column, Float, ForeignKey, Text
from sqlalchemy.orm import relationship
from tradeslink.database import Base


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Text, primary_key=True)
    account_id = Column(Text, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False)
    date = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    amount = Column(Float, nullable=False)
    status = Column(Text, nullable=False)
    invoice_url = Column(Text)
    created_at = Column(Text, nullable=False)

    account = relationship("Account", back_populates="transactions")
