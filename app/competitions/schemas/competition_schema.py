from datetime import datetime
from app.core.schemas import ApiSchema
from app.competitions.models.competition_model import CompetitionType


class CompetitionSchema(ApiSchema):
    id: int
    name: str
    code: str
    logo_url: str
    type: CompetitionType
    created_at: datetime
    updated_at: datetime
