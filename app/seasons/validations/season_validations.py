from typing import List, Optional
from app.core.utils import parse_datetime, utc_now
from app.core.validation import (
    EntityValidator,
    Field,
    id_field,
    is_available,
    is_boolean,
    is_datetime,
    is_integer,
    is_string,
    maximum,
    minimum,
)
from app.seasons.models.seasons_model import Season

YEAR_MIN = 1800


class SEASON_MESSAGES:
    YEAR_TYPE = "The year must be an integer number"
    YEAR_MIN = f"The year must be at least {YEAR_MIN}"
    YEAR_REQUIRED = "Please, provide the season's year"
    YEAR_IN_USE = "There is already a season with the provided year"
    IS_CURRENT_TYPE = "The is current season value must be a boolean"
    START_TYPE = "The starting date must be a string"
    START_FORMAT = "The starting date must be formatted as a date"
    START_REQUIRED = "Please, provide the season's start date"
    END_TYPE = "The ending date must be a string"
    END_FORMAT = "The ending date must be formatted as a date"
    END_REQUIRED = "Please, provide the season's end date"
    ID_TYPE = "The season's id must be a number or a string"
    ID_REQUIRED = "Please, provide the season's id"
    NOT_FOUND = "No season was found with the provided id"

    @staticmethod
    def year_max(year: int) -> str:
        return f"The maximum valid year is {year}"


def season_fields(exclude_id: Optional[int] = None) -> List[Field]:
    # The upper bound moves with the calendar
    year_max = utc_now().year

    return [
        Field(
            "year",
            [
                is_integer(SEASON_MESSAGES.YEAR_TYPE),
                minimum(YEAR_MIN, SEASON_MESSAGES.YEAR_MIN),
                maximum(year_max, SEASON_MESSAGES.year_max(year_max)),
                is_available(Season.year, SEASON_MESSAGES.YEAR_IN_USE, exclude_id),
            ],
            required=SEASON_MESSAGES.YEAR_REQUIRED,
            parse=int,
        ),
        Field(
            "start",
            [is_string(SEASON_MESSAGES.START_TYPE), is_datetime(SEASON_MESSAGES.START_FORMAT)],
            required=SEASON_MESSAGES.START_REQUIRED,
            parse=parse_datetime,
        ),
        Field(
            "end",
            [is_string(SEASON_MESSAGES.END_TYPE), is_datetime(SEASON_MESSAGES.END_FORMAT)],
            required=SEASON_MESSAGES.END_REQUIRED,
            parse=parse_datetime,
        ),
        Field(
            "isCurrent",
            [is_boolean(SEASON_MESSAGES.IS_CURRENT_TYPE)],
            column="is_current",
        ),
    ]


season_validator = EntityValidator(
    id_field(Season, SEASON_MESSAGES.NOT_FOUND, SEASON_MESSAGES.ID_TYPE, SEASON_MESSAGES.ID_REQUIRED),
    season_fields,
)
