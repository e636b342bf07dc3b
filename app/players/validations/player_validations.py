from datetime import datetime
from typing import List, Optional
from app.core.utils import parse_datetime, parse_id
from app.core.validation import (
    EntityValidator,
    Field,
    exists,
    id_field,
    is_available,
    is_datetime,
    is_id,
    is_number,
    is_string,
    max_length,
    maximum,
    min_length,
    minimum,
    not_before,
)
from app.country.models.country_model import Country
from app.players.models.player_model import Player
from app.positions.models.position_model import Position
from app.teams.models.team_model import Team

NAME_MIN_LENGTH = 4
NAME_MAX_LENGTH = 80
HEIGHT_MIN = 1.5
HEIGHT_MAX = 2.4
WEIGHT_MIN = 40
WEIGHT_MAX = 140
DATE_OF_BIRTH_MIN = datetime(1800, 1, 1)


class PLAYER_MESSAGES:
    NAME_TYPE = "The player's name must be a string"
    NAME_MIN_LENGTH = f"The player's name must be at least {NAME_MIN_LENGTH} characters long"
    NAME_MAX_LENGTH = f"The maximum number of characters for the player's name is {NAME_MAX_LENGTH}"
    NAME_REQUIRED = "Please, provide a name for the player"
    NAME_IN_USE = "The player's name provided is already in use"
    HEIGHT_TYPE = "The player's height must be a number"
    HEIGHT_MIN = f"The player's height must be at least {HEIGHT_MIN}"
    HEIGHT_MAX = f"The maximum value for the player's height is {HEIGHT_MAX}"
    HEIGHT_REQUIRED = "Please, provide the player's height"
    WEIGHT_TYPE = "The player's weight must be a number"
    WEIGHT_MIN = f"The player's weight must be at least {WEIGHT_MIN}"
    WEIGHT_MAX = f"The maximum value for the player's weight is {WEIGHT_MAX}"
    WEIGHT_REQUIRED = "Please, provide the player's weight"
    DATE_OF_BIRTH_TYPE = "The player's date of birth must be a date"
    DATE_OF_BIRTH_MIN = f"The date of birth must be at least from the year {DATE_OF_BIRTH_MIN.year}"
    DATE_OF_BIRTH_FORMAT = "The date of birth must be formatted as a date"
    DATE_OF_BIRTH_REQUIRED = "Please, provide the player's date of birth"
    POSITION_ID_TYPE = "The position's id must be a number or a string"
    POSITION_ID_REQUIRED = "Please, provide the id of the player's position"
    POSITION_NOT_FOUND = "No position was found with the id provided"
    COUNTRY_ID_TYPE = "The country's id must be a number or a string"
    COUNTRY_ID_REQUIRED = "Please, provide the id of the player's country"
    COUNTRY_NOT_FOUND = "No country was found with the id provided"
    CURRENT_TEAM_ID_TYPE = "The team's id must be a number or a string"
    CURRENT_TEAM_ID_REQUIRED = "Please, provide the id of the player's team"
    CURRENT_TEAM_NOT_FOUND = "No team was found with the id provided"
    NOT_FOUND = "No player was found with the provided id"
    ID_TYPE = "The player's id must be a number or a string"
    ID_REQUIRED = "Please, provide the id of a player"


def player_fields(exclude_id: Optional[int] = None) -> List[Field]:
    return [
        Field(
            "name",
            [
                is_string(PLAYER_MESSAGES.NAME_TYPE),
                min_length(NAME_MIN_LENGTH, PLAYER_MESSAGES.NAME_MIN_LENGTH),
                max_length(NAME_MAX_LENGTH, PLAYER_MESSAGES.NAME_MAX_LENGTH),
                is_available(Player.name, PLAYER_MESSAGES.NAME_IN_USE, exclude_id),
            ],
            required=PLAYER_MESSAGES.NAME_REQUIRED,
        ),
        Field(
            "dateOfBirth",
            [
                is_string(PLAYER_MESSAGES.DATE_OF_BIRTH_TYPE),
                is_datetime(PLAYER_MESSAGES.DATE_OF_BIRTH_FORMAT),
                not_before(DATE_OF_BIRTH_MIN, PLAYER_MESSAGES.DATE_OF_BIRTH_MIN),
            ],
            required=PLAYER_MESSAGES.DATE_OF_BIRTH_REQUIRED,
            column="date_of_birth",
            parse=parse_datetime,
        ),
        Field(
            "height",
            [
                is_number(PLAYER_MESSAGES.HEIGHT_TYPE),
                minimum(HEIGHT_MIN, PLAYER_MESSAGES.HEIGHT_MIN),
                maximum(HEIGHT_MAX, PLAYER_MESSAGES.HEIGHT_MAX),
            ],
            required=PLAYER_MESSAGES.HEIGHT_REQUIRED,
        ),
        Field(
            "weight",
            [
                is_number(PLAYER_MESSAGES.WEIGHT_TYPE),
                minimum(WEIGHT_MIN, PLAYER_MESSAGES.WEIGHT_MIN),
                maximum(WEIGHT_MAX, PLAYER_MESSAGES.WEIGHT_MAX),
            ],
            required=PLAYER_MESSAGES.WEIGHT_REQUIRED,
        ),
        Field(
            "positionId",
            [
                is_id(PLAYER_MESSAGES.POSITION_ID_TYPE),
                exists(Position, PLAYER_MESSAGES.POSITION_NOT_FOUND),
            ],
            required=PLAYER_MESSAGES.POSITION_ID_REQUIRED,
            column="position_id",
            parse=parse_id,
        ),
        Field(
            "countryId",
            [
                is_id(PLAYER_MESSAGES.COUNTRY_ID_TYPE),
                exists(Country, PLAYER_MESSAGES.COUNTRY_NOT_FOUND),
            ],
            required=PLAYER_MESSAGES.COUNTRY_ID_REQUIRED,
            column="country_id",
            parse=parse_id,
        ),
        Field(
            "currentTeamId",
            [
                is_id(PLAYER_MESSAGES.CURRENT_TEAM_ID_TYPE),
                exists(Team, PLAYER_MESSAGES.CURRENT_TEAM_NOT_FOUND),
            ],
            required=PLAYER_MESSAGES.CURRENT_TEAM_ID_REQUIRED,
            column="current_team_id",
            parse=parse_id,
        ),
    ]


player_validator = EntityValidator(
    id_field(Player, PLAYER_MESSAGES.NOT_FOUND, PLAYER_MESSAGES.ID_TYPE, PLAYER_MESSAGES.ID_REQUIRED),
    player_fields,
)
