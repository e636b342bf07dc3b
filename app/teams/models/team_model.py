from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.core.utils import utc_now

class Team(Base):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(80), unique=True, nullable=False)
    code = Column(String(3), unique=True, nullable=False)
    logo_url = Column(String, nullable=False)
    founding_date = Column(DateTime, nullable=False)
    is_national = Column(Boolean, nullable=False, default=False)
    country_id = Column(Integer, ForeignKey("countries.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    country = relationship("Country", back_populates="teams")
    players = relationship("Player", back_populates="current_team", passive_deletes=True)
    home_matches = relationship("Match", foreign_keys="[Match.home_team_id]", back_populates="home_team", passive_deletes=True)
    away_matches = relationship("Match", foreign_keys="[Match.away_team_id]", back_populates="away_team", passive_deletes=True)
    goals = relationship("MatchGoal", back_populates="team", passive_deletes=True)
    trophies = relationship("Trophy", back_populates="team", passive_deletes=True)
    transfers_out = relationship("Transfer", foreign_keys="[Transfer.previous_team_id]", back_populates="previous_team", passive_deletes=True)
    transfers_in = relationship("Transfer", foreign_keys="[Transfer.new_team_id]", back_populates="new_team", passive_deletes=True)
