from datetime import datetime
from app.core.schemas import ApiSchema


class CountrySchema(ApiSchema):
    id: int
    name: str
    code: str
    flag_url: str
    created_at: datetime
    updated_at: datetime
