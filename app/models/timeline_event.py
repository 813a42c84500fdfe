"""
Timeline event model
"""

from sqlalchemy import Column, Integer, String, Text

from app.core.db import Base

class TimelineEvent(Base):
    __tablename__ = "timeline_events"

    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    start_time = Column(String(50), nullable=False)
    end_time = Column(String(50), nullable=False)
    location = Column(String(255))
    event_type = Column(String(100), nullable=False)  # ceremony, reception, photo, ...
