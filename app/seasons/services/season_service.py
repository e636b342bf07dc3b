from app.core.crud import CrudService
from app.seasons.models.seasons_model import Season
from app.seasons.validations.season_validations import season_validator

class SeasonService(CrudService):
    model = Season
    validator = season_validator
    label = "season"
