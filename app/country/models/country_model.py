from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.core.utils import utc_now

class Country(Base):
    __tablename__ = "countries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(80), unique=True, nullable=False)
    code = Column(String(2), unique=True, nullable=False)
    flag_url = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    # Rows referencing a country are removed by the database (ON DELETE CASCADE)
    teams = relationship("Team", back_populates="country", passive_deletes=True)
    players = relationship("Player", back_populates="country", passive_deletes=True)
