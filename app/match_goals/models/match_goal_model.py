from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.core.utils import utc_now

class MatchGoal(Base):
    __tablename__ = "match_goals"

    id = Column(Integer, primary_key=True, index=True)
    match_id = Column(Integer, ForeignKey("matches.id", ondelete="CASCADE"), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False)
    goalscorer_id = Column(Integer, ForeignKey("players.id", ondelete="CASCADE"), nullable=False)
    # Losing the assistant keeps the goal
    assistant_id = Column(Integer, ForeignKey("players.id", ondelete="SET NULL"), nullable=True)
    is_own_goal = Column(Boolean, nullable=False)
    goal_timestamp = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    match = relationship("Match", back_populates="goals")
    team = relationship("Team", back_populates="goals")
    goalscorer = relationship("Player", foreign_keys=[goalscorer_id], back_populates="goals")
    assistant = relationship("Player", foreign_keys=[assistant_id], back_populates="assists")
