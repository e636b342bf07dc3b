from datetime import datetime
from app.core.schemas import ApiSchema


class MatchSchema(ApiSchema):
    id: int
    competition_id: int
    season_id: int
    home_team_id: int
    away_team_id: int
    created_at: datetime
    updated_at: datetime
