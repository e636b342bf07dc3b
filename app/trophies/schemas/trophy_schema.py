from datetime import datetime
from app.core.schemas import ApiSchema


class TrophySchema(ApiSchema):
    id: int
    competition_id: int
    season_id: int
    team_id: int
    created_at: datetime
    updated_at: datetime
