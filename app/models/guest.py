"""
Guest model
"""

from sqlalchemy import Column, Integer, String, Boolean, Text

from app.core.db import Base

class Guest(Base):
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255))
    phone = Column(String(50))
    rsvp_status = Column(String(20), nullable=False, default="pending")  # pending, confirmed, declined
    plus_one = Column(Boolean, nullable=False, default=False)
    dietary_restrictions = Column(Text)
    # Holds a seating table *number*, not a seating_tables.id, so no foreign key
    table_assignment = Column(Integer, index=True)
    notes = Column(Text)
