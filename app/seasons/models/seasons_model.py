from sqlalchemy import Column, Integer, Boolean, DateTime
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.core.utils import utc_now

class Season(Base): 
    __tablename__ = "seasons"

    id = Column(Integer, primary_key=True, index=True)
    year = Column(Integer, unique=True, nullable=False)
    start = Column(DateTime, nullable=False)
    end = Column(DateTime, nullable=False)
    is_current = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    matches = relationship("Match", back_populates="season", passive_deletes=True)
    trophies = relationship("Trophy", back_populates="season", passive_deletes=True)
