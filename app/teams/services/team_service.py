from app.core.crud import CrudService
from app.teams.models.team_model import Team
from app.teams.validations.team_validations import team_validator

class TeamService(CrudService):
    model = Team
    validator = team_validator
    label = "team"
