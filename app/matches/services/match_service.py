from app.core.crud import CrudService
from app.matches.models.match_model import Match
from app.matches.validations.match_validations import match_validator

class MatchService(CrudService):
    model = Match
    validator = match_validator
    label = "match"
