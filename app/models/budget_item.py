"""
Budget item model
"""

from sqlalchemy import Column, Integer, String, Boolean, Numeric, Text

from app.core.db import Base

class BudgetItem(Base):
    __tablename__ = "budget_items"

    id = Column(Integer, primary_key=True, autoincrement=False)
    category = Column(String(100), nullable=False)
    description = Column(String(255), nullable=False)
    budget_amount = Column(Numeric(10, 2), nullable=False)
    actual_amount = Column(Numeric(10, 2), nullable=False, default=0)
    is_paid = Column(Boolean, nullable=False, default=False)
    notes = Column(Text)
