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
)
from app.country.models.country_model import Country

NAME_MIN_LENGTH = 4
NAME_MAX_LENGTH = 80
CODE_LENGTH = 2


class COUNTRY_MESSAGES:
    NAME_TYPE = "The country's name must be a string"
    NAME_MIN_LENGTH = f"The country's name must be at least {NAME_MIN_LENGTH} characters long"
    NAME_MAX_LENGTH = f"The maximum number of characters for the country's name is {NAME_MAX_LENGTH}"
    NAME_REQUIRED = "Please, provide a name for the country"
    NAME_IN_USE = "The country's name provided is already in use"
    CODE_TYPE = "The country's code must be a string"
    CODE_LENGTH = f"The country's code must have exactly {CODE_LENGTH} characters"
    CODE_REQUIRED = "Please, provide a code to the country"
    CODE_IN_USE = "The code provided is already in use"
    FLAG_URL_TYPE = "The country's flag url must be a string"
    FLAG_URL_REQUIRED = "Please, provide an url to the country's flag"
    NOT_FOUND = "No country was found with the provided id"
    ID_TYPE = "The country's id must be a number or a string"
    ID_REQUIRED = "Please, provide the id of a country"


def country_fields(exclude_id: Optional[int] = None) -> List[Field]:
    return [
        Field(
            "name",
            [
                is_string(COUNTRY_MESSAGES.NAME_TYPE),
                min_length(NAME_MIN_LENGTH, COUNTRY_MESSAGES.NAME_MIN_LENGTH),
                max_length(NAME_MAX_LENGTH, COUNTRY_MESSAGES.NAME_MAX_LENGTH),
                is_available(Country.name, COUNTRY_MESSAGES.NAME_IN_USE, exclude_id),
            ],
            required=COUNTRY_MESSAGES.NAME_REQUIRED,
        ),
        Field(
            "code",
            [
                is_string(COUNTRY_MESSAGES.CODE_TYPE),
                exact_length(CODE_LENGTH, COUNTRY_MESSAGES.CODE_LENGTH),
                is_available(Country.code, COUNTRY_MESSAGES.CODE_IN_USE, exclude_id),
            ],
            required=COUNTRY_MESSAGES.CODE_REQUIRED,
        ),
        Field(
            "flagUrl",
            [is_string(COUNTRY_MESSAGES.FLAG_URL_TYPE)],
            required=COUNTRY_MESSAGES.FLAG_URL_REQUIRED,
            column="flag_url",
        ),
    ]


country_validator = EntityValidator(
    id_field(Country, COUNTRY_MESSAGES.NOT_FOUND, COUNTRY_MESSAGES.ID_TYPE, COUNTRY_MESSAGES.ID_REQUIRED),
    country_fields,
)
