from typing import List, Optional
from app.core.validation import (
    EntityValidator,
    Field,
    exact_length,
    id_field,
    is_available,
    is_string,
    max_length,
    min_length,
    one_of,
)
from app.competitions.models.competition_model import Competition, CompetitionType

NAME_MIN_LENGTH = 6
NAME_MAX_LENGTH = 80
CODE_LENGTH = 2


class COMPETITION_MESSAGES:
    NAME_TYPE = "The competition's name must be a string"
    NAME_MIN_LENGTH = f"The competition's name must be at least {NAME_MIN_LENGTH} characters long"
    NAME_MAX_LENGTH = f"The maximum number of characters for the competition's name is {NAME_MAX_LENGTH}"
    NAME_REQUIRED = "Please, provide a name for the competition"
    NAME_IN_USE = "The competition's name provided is already in use"
    LOGO_URL_TYPE = "The competition's logo url must be a string"
    LOGO_URL_REQUIRED = "Please, provide an url to the competition's logo"
    CODE_TYPE = "The competition's code must be a string"
    CODE_LENGTH = f"The competition's code must have exactly {CODE_LENGTH} characters"
    CODE_REQUIRED = "Please, provide a code to the competition"
    CODE_IN_USE = "The code provided is already in use"
    TYPE = "The competition's type must be league or cup"
    TYPE_REQUIRED = "Please, provide the competition's type"
    NOT_FOUND = "No competition was found with the provided id"
    ID_TYPE = "The competition's id must be a number or a string"
    ID_REQUIRED = "Please, provide the id of a competition"


def competition_fields(exclude_id: Optional[int] = None) -> List[Field]:
    return [
        Field(
            "name",
            [
                is_string(COMPETITION_MESSAGES.NAME_TYPE),
                min_length(NAME_MIN_LENGTH, COMPETITION_MESSAGES.NAME_MIN_LENGTH),
                max_length(NAME_MAX_LENGTH, COMPETITION_MESSAGES.NAME_MAX_LENGTH),
                is_available(Competition.name, COMPETITION_MESSAGES.NAME_IN_USE, exclude_id),
            ],
            required=COMPETITION_MESSAGES.NAME_REQUIRED,
        ),
        Field(
            "code",
            [
                is_string(COMPETITION_MESSAGES.CODE_TYPE),
                exact_length(CODE_LENGTH, COMPETITION_MESSAGES.CODE_LENGTH),
                is_available(Competition.code, COMPETITION_MESSAGES.CODE_IN_USE, exclude_id),
            ],
            required=COMPETITION_MESSAGES.CODE_REQUIRED,
        ),
        Field(
            "logoUrl",
            [is_string(COMPETITION_MESSAGES.LOGO_URL_TYPE)],
            required=COMPETITION_MESSAGES.LOGO_URL_REQUIRED,
            column="logo_url",
        ),
        Field(
            "type",
            [one_of([kind.value for kind in CompetitionType], COMPETITION_MESSAGES.TYPE)],
            required=COMPETITION_MESSAGES.TYPE_REQUIRED,
            parse=CompetitionType,
        ),
    ]


competition_validator = EntityValidator(
    id_field(
        Competition,
        COMPETITION_MESSAGES.NOT_FOUND,
        COMPETITION_MESSAGES.ID_TYPE,
        COMPETITION_MESSAGES.ID_REQUIRED,
    ),
    competition_fields,
)
