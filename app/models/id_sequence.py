"""
Shared id counter used by every collection
"""

from sqlalchemy import Column, Integer, String

from app.core.db import Base

class IdSequence(Base):
    __tablename__ = "id_sequence"

    name = Column(String(50), primary_key=True)
    next_value = Column(Integer, nullable=False, default=1)
