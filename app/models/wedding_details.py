"""
Wedding details model (single row)
"""

from sqlalchemy import Column, Integer, String, Date, Numeric

from app.core.db import Base

class WeddingDetails(Base):
    __tablename__ = "wedding_details"

    id = Column(Integer, primary_key=True, autoincrement=False)
    bride_name = Column(String(255), nullable=False)
    groom_name = Column(String(255), nullable=False)
    wedding_date = Column(Date, nullable=False)
    venue = Column(String(255), nullable=False)
    total_budget = Column(Numeric(10, 2), nullable=False)
