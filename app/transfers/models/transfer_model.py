from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.core.utils import utc_now

class Transfer(Base):
    __tablename__ = "transfers"

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(Integer, ForeignKey("players.id", ondelete="CASCADE"), nullable=False)
    previous_team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False)
    new_team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False)
    fee = Column(Numeric(12, 2), nullable=False)
    date = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    player = relationship("Player", back_populates="transfers")
    previous_team = relationship("Team", foreign_keys=[previous_team_id], back_populates="transfers_out")
    new_team = relationship("Team", foreign_keys=[new_team_id], back_populates="transfers_in")
