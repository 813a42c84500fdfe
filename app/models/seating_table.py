"""
Seating table model
"""

from sqlalchemy import Column, Integer, String

from app.core.db import Base

class SeatingTable(Base):
    __tablename__ = "seating_tables"

    id = Column(Integer, primary_key=True, autoincrement=False)
    table_number = Column(Integer, nullable=False, index=True)
    capacity = Column(Integer, nullable=False)
    position_x = Column(Integer, nullable=False, default=0)
    position_y = Column(Integer, nullable=False, default=0)
    shape = Column(String(20), nullable=False, default="round")  # round, rectangular

    # table_number uniqueness is not enforced, duplicates pool their capacity
    __table_args__ = ()
