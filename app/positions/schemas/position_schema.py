from datetime import datetime
from app.core.schemas import ApiSchema


class PositionSchema(ApiSchema):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime
