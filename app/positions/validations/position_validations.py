from typing import List, Optional
from app.core.validation import (
    EntityValidator,
    Field,
    id_field,
    is_available,
    is_string,
    max_length,
    min_length,
)
from app.positions.models.position_model import Position

NAME_MIN_LENGTH = 4
NAME_MAX_LENGTH = 80


class POSITION_MESSAGES:
    NAME_TYPE = "The position's name must be a string"
    NAME_MIN_LENGTH = f"The position's name must be at least {NAME_MIN_LENGTH} characters long"
    NAME_MAX_LENGTH = f"The maximum number of characters for the position's name is {NAME_MAX_LENGTH}"
    NAME_REQUIRED = "Please, provide a name for the position"
    NAME_IN_USE = "The position's name provided is already in use"
    NOT_FOUND = "No position was found with the provided id"
    ID_TYPE = "The position's id must be a number or a string"
    ID_REQUIRED = "Please, provide the id of a position"


def position_fields(exclude_id: Optional[int] = None) -> List[Field]:
    return [
        Field(
            "name",
            [
                is_string(POSITION_MESSAGES.NAME_TYPE),
                min_length(NAME_MIN_LENGTH, POSITION_MESSAGES.NAME_MIN_LENGTH),
                max_length(NAME_MAX_LENGTH, POSITION_MESSAGES.NAME_MAX_LENGTH),
                is_available(Position.name, POSITION_MESSAGES.NAME_IN_USE, exclude_id),
            ],
            required=POSITION_MESSAGES.NAME_REQUIRED,
        ),
    ]


position_validator = EntityValidator(
    id_field(Position, POSITION_MESSAGES.NOT_FOUND, POSITION_MESSAGES.ID_TYPE, POSITION_MESSAGES.ID_REQUIRED),
    position_fields,
)
