from app.core.crud import CrudService
from app.positions.models.position_model import Position
from app.positions.validations.position_validations import position_validator

class PositionService(CrudService):
    model = Position
    validator = position_validator
    label = "position"
