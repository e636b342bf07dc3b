from datetime import datetime
from decimal import Decimal
from app.core.schemas import ApiSchema


class TransferSchema(ApiSchema):
    id: int
    player_id: int
    previous_team_id: int
    new_team_id: int
    fee: Decimal
    date: datetime
    created_at: datetime
    updated_at: datetime
