"""
Planning task model
"""

from sqlalchemy import Column, Integer, String, Boolean, Date, Text

from app.core.db import Base

class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    is_completed = Column(Boolean, nullable=False, default=False)
    due_date = Column(Date)
    priority = Column(String(10), nullable=False, default="medium")  # low, medium, high
    category = Column(String(100))
