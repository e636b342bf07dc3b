from app.core.crud import CrudService
from app.competitions.models.competition_model import Competition
from app.competitions.validations.competition_validations import competition_validator

class CompetitionService(CrudService):
    model = Competition
    validator = competition_validator
    label = "competition"
