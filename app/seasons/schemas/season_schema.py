from datetime import datetime
from app.core.schemas import ApiSchema


class SeasonSchema(ApiSchema):
    id: int
    year: int
    start: datetime
    end: datetime
    is_current: bool
    created_at: datetime
    updated_at: datetime
