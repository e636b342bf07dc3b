from datetime import datetime
from typing import List, Optional
from app.core.utils import parse_datetime, parse_id, utc_now
from app.core.validation import (
    EntityValidator,
    Field,
    exact_length,
    exists,
    id_field,
    is_available,
    is_boolean,
    is_datetime,
    is_id,
    is_string,
    max_length,
    min_length,
    not_after,
    not_before,
)
from app.country.models.country_model import Country
from app.teams.models.team_model import Team

NAME_MIN_LENGTH = 6
NAME_MAX_LENGTH = 80
CODE_LENGTH = 3
FOUNDING_DATE_MIN = datetime(1800, 1, 1)


class TEAM_MESSAGES:
    NAME_TYPE = "The team's name must be a string"
    NAME_MIN_LENGTH = f"The team's name must be at least {NAME_MIN_LENGTH} characters long"
    NAME_MAX_LENGTH = f"The maximum number of characters for the team's name is {NAME_MAX_LENGTH}"
    NAME_REQUIRED = "Please, provide a name for the team"
    NAME_IN_USE = "The team's name provided is already in use"
    LOGO_URL_TYPE = "The team's logo url must be a string"
    LOGO_URL_REQUIRED = "Please, provide an url to the team's logo"
    CODE_TYPE = "The team's code must be a string"
    CODE_LENGTH = f"The team's code must have exactly {CODE_LENGTH} characters"
    CODE_REQUIRED = "Please, provide a code to the team"
    CODE_IN_USE = "The code provided is already in use"
    FOUNDING_DATE_MIN = f"The team's founding year must be at least {FOUNDING_DATE_MIN.year}"
    FOUNDING_DATE_MAX = "The team's founding date can't be in the future"
    FOUNDING_DATE_TYPE = "The team's founding year must be a string"
    FOUNDING_DATE_FORMAT = "The team's founding year must be formatted as a date"
    FOUNDING_DATE_REQUIRED = "Please, provide the team's founding year"
    IS_NATIONAL_TYPE = "The team's 'is national' must be a boolean value"
    COUNTRY_ID_TYPE = "The country's id must be a number or a string"
    COUNTRY_ID_REQUIRED = "Please, provide the id of the team's country"
    COUNTRY_NOT_FOUND = "No country was found with the id provided"
    NOT_FOUND = "No team was found with the provided id"
    ID_TYPE = "The team's id must be a number or a string"
    ID_REQUIRED = "Please, provide the id of a team"


def team_fields(exclude_id: Optional[int] = None) -> List[Field]:
    return [
        Field(
            "name",
            [
                is_string(TEAM_MESSAGES.NAME_TYPE),
                min_length(NAME_MIN_LENGTH, TEAM_MESSAGES.NAME_MIN_LENGTH),
                max_length(NAME_MAX_LENGTH, TEAM_MESSAGES.NAME_MAX_LENGTH),
                is_available(Team.name, TEAM_MESSAGES.NAME_IN_USE, exclude_id),
            ],
            required=TEAM_MESSAGES.NAME_REQUIRED,
        ),
        Field(
            "code",
            [
                is_string(TEAM_MESSAGES.CODE_TYPE),
                exact_length(CODE_LENGTH, TEAM_MESSAGES.CODE_LENGTH),
                is_available(Team.code, TEAM_MESSAGES.CODE_IN_USE, exclude_id),
            ],
            required=TEAM_MESSAGES.CODE_REQUIRED,
        ),
        Field(
            "logoUrl",
            [is_string(TEAM_MESSAGES.LOGO_URL_TYPE)],
            required=TEAM_MESSAGES.LOGO_URL_REQUIRED,
            column="logo_url",
        ),
        Field(
            "foundingDate",
            [
                is_string(TEAM_MESSAGES.FOUNDING_DATE_TYPE),
                is_datetime(TEAM_MESSAGES.FOUNDING_DATE_FORMAT),
                not_before(FOUNDING_DATE_MIN, TEAM_MESSAGES.FOUNDING_DATE_MIN),
                not_after(utc_now, TEAM_MESSAGES.FOUNDING_DATE_MAX),
            ],
            required=TEAM_MESSAGES.FOUNDING_DATE_REQUIRED,
            column="founding_date",
            parse=parse_datetime,
        ),
        Field(
            "isNational",
            [is_boolean(TEAM_MESSAGES.IS_NATIONAL_TYPE)],
            column="is_national",
        ),
        Field(
            "countryId",
            [
                is_id(TEAM_MESSAGES.COUNTRY_ID_TYPE),
                exists(Country, TEAM_MESSAGES.COUNTRY_NOT_FOUND),
            ],
            required=TEAM_MESSAGES.COUNTRY_ID_REQUIRED,
            column="country_id",
            parse=parse_id,
        ),
    ]


team_validator = EntityValidator(
    id_field(Team, TEAM_MESSAGES.NOT_FOUND, TEAM_MESSAGES.ID_TYPE, TEAM_MESSAGES.ID_REQUIRED),
    team_fields,
)
