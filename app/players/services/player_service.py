from app.core.crud import CrudService
from app.players.models.player_model import Player
from app.players.validations.player_validations import player_validator

class PlayerService(CrudService):
    model = Player
    validator = player_validator
    label = "player"
