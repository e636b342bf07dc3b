from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.core.utils import utc_now

class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(80), unique=True, nullable=False)
    date_of_birth = Column(DateTime, nullable=False)
    height = Column(Numeric(3, 2), nullable=False)
    weight = Column(Numeric(5, 2), nullable=False)
    position_id = Column(Integer, ForeignKey("positions.id", ondelete="CASCADE"), nullable=False)
    country_id = Column(Integer, ForeignKey("countries.id", ondelete="CASCADE"), nullable=False)
    current_team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    position = relationship("Position", back_populates="players")
    country = relationship("Country", back_populates="players")
    current_team = relationship("Team", back_populates="players")
    transfers = relationship("Transfer", back_populates="player", passive_deletes=True)
    goals = relationship("MatchGoal", foreign_keys="[MatchGoal.goalscorer_id]", back_populates="goalscorer", passive_deletes=True)
    assists = relationship("MatchGoal", foreign_keys="[MatchGoal.assistant_id]", back_populates="assistant", passive_deletes=True)
