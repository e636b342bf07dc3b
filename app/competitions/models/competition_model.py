import enum
from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.core.utils import utc_now


class CompetitionType(str, enum.Enum):
    LEAGUE = "LEAGUE"
    CUP = "CUP"


class Competition(Base):
    __tablename__ = "competitions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(80), unique=True, nullable=False)
    code = Column(String(2), unique=True, nullable=False)
    logo_url = Column(String, nullable=False)
    type = Column(Enum(CompetitionType, name="competition_type"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    matches = relationship("Match", back_populates="competition", passive_deletes=True)
    trophies = relationship("Trophy", back_populates="competition", passive_deletes=True)
