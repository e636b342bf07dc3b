from app.core.crud import CrudService
from app.trophies.models.trophy_model import Trophy
from app.trophies.validations.trophy_validations import trophy_validator

class TrophyService(CrudService):
    model = Trophy
    validator = trophy_validator
    label = "trophy"
