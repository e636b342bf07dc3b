from datetime import datetime
from app.core.schemas import ApiSchema


class TeamSchema(ApiSchema):
    id: int
    name: str
    code: str
    logo_url: str
    founding_date: datetime
    is_national: bool
    country_id: int
    created_at: datetime
    updated_at: datetime
