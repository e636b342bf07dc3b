from typing import List, Optional
from app.core.security import encrypt_password
from app.core.validation import (
    EntityValidator,
    Field,
    exists_by,
    id_field,
    is_available,
    is_string,
    matches,
    max_length,
    min_length,
    one_of,
)
from app.users.models.user_model import Role, User

USERNAME_MIN_LENGTH = 8
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 10
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class USER_MESSAGES:
    NAME_REQUIRED = "Please, provide an username"
    NAME_TYPE = "The name must be a string"
    NAME_MIN = f"The username must be at least {USERNAME_MIN_LENGTH} characters long"
    NAME_MAX = f"The maximum number of characters for the username is {USERNAME_MAX_LENGTH}"
    NAME_IN_USE = "This username is already in use"
    EMAIL_REQUIRED = "Please, provide an email"
    EMAIL_TYPE = "The email must be a string"
    EMAIL_INVALID = "The email provided is invalid"
    EMAIL_IN_USE = "This email is already in use"
    PASSWORD_REQUIRED = "Please, provide a password"
    PASSWORD_TYPE = "The password must be a string"
    PASSWORD_MIN = f"The password must be at least {PASSWORD_MIN_LENGTH} characters long"
    PASSWORD_INCORRECT = "The password is incorrect"
    ROLE = "The user's role must be USER or ADMIN"
    NOT_FOUND = "No user was found with the provided id"
    NOT_FOUND_BY_EMAIL = "No user was found with the provided email"
    ID_TYPE = "The user's id must be a number or a string"
    ID_REQUIRED = "Please, provide the id of an user"


def user_fields(exclude_id: Optional[int] = None) -> List[Field]:
    return [
        Field(
            "name",
            [
                is_string(USER_MESSAGES.NAME_TYPE),
                min_length(USERNAME_MIN_LENGTH, USER_MESSAGES.NAME_MIN),
                max_length(USERNAME_MAX_LENGTH, USER_MESSAGES.NAME_MAX),
                is_available(User.name, USER_MESSAGES.NAME_IN_USE, exclude_id),
            ],
            required=USER_MESSAGES.NAME_REQUIRED,
        ),
        Field(
            "email",
            [
                is_string(USER_MESSAGES.EMAIL_TYPE),
                matches(EMAIL_PATTERN, USER_MESSAGES.EMAIL_INVALID),
                is_available(User.email, USER_MESSAGES.EMAIL_IN_USE, exclude_id),
            ],
            required=USER_MESSAGES.EMAIL_REQUIRED,
        ),
        Field(
            "password",
            [
                is_string(USER_MESSAGES.PASSWORD_TYPE),
                min_length(PASSWORD_MIN_LENGTH, USER_MESSAGES.PASSWORD_MIN),
            ],
            required=USER_MESSAGES.PASSWORD_REQUIRED,
            parse=encrypt_password,
        ),
    ]


def role_field() -> Field:
    """Only admins may send this one; it is appended to the update fields for them."""
    return Field("role", [one_of([role.value for role in Role], USER_MESSAGES.ROLE)], parse=Role)


def password_field() -> Field:
    return Field(
        "password",
        [is_string(USER_MESSAGES.PASSWORD_TYPE)],
        required=USER_MESSAGES.PASSWORD_REQUIRED,
    )


def login_fields() -> List[Field]:
    return [
        Field(
            "email",
            [
                is_string(USER_MESSAGES.EMAIL_TYPE),
                exists_by(User.email, USER_MESSAGES.NOT_FOUND_BY_EMAIL),
            ],
            required=USER_MESSAGES.EMAIL_REQUIRED,
        ),
        password_field(),
    ]


user_validator = EntityValidator(
    id_field(User, USER_MESSAGES.NOT_FOUND, USER_MESSAGES.ID_TYPE, USER_MESSAGES.ID_REQUIRED),
    user_fields,
)
