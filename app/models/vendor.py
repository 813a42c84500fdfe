"""
Vendor model
"""

from sqlalchemy import Column, Integer, String, Boolean, Numeric, Text

from app.core.db import Base

class Vendor(Base):
    __tablename__ = "vendors"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False)
    contact_name = Column(String(255))
    phone = Column(String(50))
    email = Column(String(255))
    website = Column(String(500))
    address = Column(Text)
    contract_amount = Column(Numeric(10, 2))
    is_booked = Column(Boolean, nullable=False, default=False)
    notes = Column(Text)
