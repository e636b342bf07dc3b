from datetime import datetime
from typing import Optional
from app.core.schemas import ApiSchema


class MatchGoalSchema(ApiSchema):
    id: int
    match_id: int
    team_id: int
    goalscorer_id: int
    assistant_id: Optional[int] = None
    is_own_goal: bool
    goal_timestamp: datetime
    created_at: datetime
    updated_at: datetime
