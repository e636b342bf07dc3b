from typing import List, Optional
from app.core.utils import parse_datetime
from app.core.validation import (
    EntityValidator,
    Field,
    id_field,
    is_datetime,
    is_number,
    is_string,
    maximum,
    minimum,
    reference,
)
from app.players.models.player_model import Player
from app.teams.models.team_model import Team
from app.transfers.models.transfer_model import Transfer

FEE_MIN = 1000
FEE_MAX = 9999999999


class TRANSFER_MESSAGES:
    PREVIOUS_TEAM_ID_TYPE = "The type of the previous team's id must be string or number"
    PREVIOUS_TEAM_ID_REQUIRED = "Please, provide the id of the previous team"
    PREVIOUS_TEAM_NOT_FOUND = "No team was found with the provided id for the previous team"
    NEW_TEAM_ID_TYPE = "The type of the new team's id must be string or number"
    NEW_TEAM_ID_REQUIRED = "Please, provide the id of the new team"
    NEW_TEAM_NOT_FOUND = "No team was found with the provided id for the new team"
    PLAYER_ID_TYPE = "The type of the player's id must be string or number"
    PLAYER_ID_REQUIRED = "Please, provide the id of the player"
    PLAYER_NOT_FOUND = "No player was found with the provided id"
    FEE_TYPE = "The transfer fee must be a number"
    FEE_MIN = f"The transfer fee must be at least {FEE_MIN}"
    FEE_MAX = f"The maximum value for a transfer is {FEE_MAX}"
    FEE_REQUIRED = "Please, provide the transfer's fee"
    DATE_TYPE = "The transfer's date must be a string"
    DATE_FORMAT = "The transfer's date must be formatted as a date"
    DATE_REQUIRED = "Please, provide the transfer's date"
    ID_TYPE = "The type of the transfer's id must be string or number"
    ID_REQUIRED = "Please, provide the id of the transfer"
    NOT_FOUND = "No transfer was found with the id provided"


def transfer_fields(exclude_id: Optional[int] = None) -> List[Field]:
    return [
        reference(
            "playerId", "player_id", Player,
            TRANSFER_MESSAGES.PLAYER_ID_TYPE,
            TRANSFER_MESSAGES.PLAYER_NOT_FOUND,
            TRANSFER_MESSAGES.PLAYER_ID_REQUIRED,
        ),
        reference(
            "previousTeamId", "previous_team_id", Team,
            TRANSFER_MESSAGES.PREVIOUS_TEAM_ID_TYPE,
            TRANSFER_MESSAGES.PREVIOUS_TEAM_NOT_FOUND,
            TRANSFER_MESSAGES.PREVIOUS_TEAM_ID_REQUIRED,
        ),
        reference(
            "newTeamId", "new_team_id", Team,
            TRANSFER_MESSAGES.NEW_TEAM_ID_TYPE,
            TRANSFER_MESSAGES.NEW_TEAM_NOT_FOUND,
            TRANSFER_MESSAGES.NEW_TEAM_ID_REQUIRED,
        ),
        Field(
            "fee",
            [
                is_number(TRANSFER_MESSAGES.FEE_TYPE),
                minimum(FEE_MIN, TRANSFER_MESSAGES.FEE_MIN),
                maximum(FEE_MAX, TRANSFER_MESSAGES.FEE_MAX),
            ],
            required=TRANSFER_MESSAGES.FEE_REQUIRED,
        ),
        Field(
            "date",
            [is_string(TRANSFER_MESSAGES.DATE_TYPE), is_datetime(TRANSFER_MESSAGES.DATE_FORMAT)],
            required=TRANSFER_MESSAGES.DATE_REQUIRED,
            parse=parse_datetime,
        ),
    ]


transfer_validator = EntityValidator(
    id_field(Transfer, TRANSFER_MESSAGES.NOT_FOUND, TRANSFER_MESSAGES.ID_TYPE, TRANSFER_MESSAGES.ID_REQUIRED),
    transfer_fields,
)
