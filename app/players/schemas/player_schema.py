from datetime import datetime
from decimal import Decimal
from app.core.schemas import ApiSchema


class PlayerSchema(ApiSchema):
    id: int
    name: str
    date_of_birth: datetime
    height: Decimal
    weight: Decimal
    position_id: int
    country_id: int
    current_team_id: int
    created_at: datetime
    updated_at: datetime
