import logging
from app.core.auth import Principal
from app.core.crud import CrudService
from app.core.errors import BadRequestError, ForbiddenError, FORBIDDEN_ERROR_MESSAGE
from app.core.security import compare_password, create_token, get_user_payload
from app.core.validation import (
    collect_values,
    optional,
    raise_for_errors,
    validate,
)
from app.users.models.user_model import User
from app.users.validations.user_validations import (
    USER_MESSAGES,
    login_fields,
    password_field,
    role_field,
    user_fields,
    user_validator,
)

logger = logging.getLogger(__name__)


class UserService(CrudService):
    """Accounts: registration, login and the owner/admin account operations."""

    model = User
    validator = user_validator
    label = "user"

    def register(self, data: dict) -> dict:
        user = self.create(data)
        return self.session_for(user)

    def login(self, data: dict) -> dict:
        raise_for_errors(validate(self.db, data, login_fields()))
        user = self.query().filter(User.email == data["email"]).first()

        if not compare_password(data["password"], user.password):
            logger.warning(f"⚠️ Failed login for user {user.id}")
            raise BadRequestError(USER_MESSAGES.PASSWORD_INCORRECT)

        logger.info(f"🔑 User {user.id} logged in")
        return self.session_for(user)

    def update_account(self, principal: Principal, user_id, data: dict) -> dict:
        """
        Update a user on behalf of ``principal``.

        Users may only update themselves; admins may update anyone and are the
        only ones allowed to change a role. Updating yourself returns a fresh
        token carrying the new claims.
        """
        is_self = str(principal.id) == str(user_id)
        if not is_self and not principal.is_admin:
            raise ForbiddenError(FORBIDDEN_ERROR_MESSAGE)
        if data.get("role") is not None and not principal.is_admin:
            raise ForbiddenError(FORBIDDEN_ERROR_MESSAGE)

        raise_for_errors(self.validator.validate_id(self.db, user_id))
        user = self.get(user_id)

        fields = optional(user_fields(user.id))
        if principal.is_admin:
            fields.append(role_field())
        raise_for_errors(validate(self.db, data, fields))

        user = self.apply(user, collect_values(fields, data))
        if is_self:
            return self.session_for(user)
        return {"user": get_user_payload(user)}

    def delete_own_account(self, principal: Principal, data: dict) -> User:
        """Remove the principal's account once the password is confirmed."""
        raise_for_errors(self.validator.validate_id(self.db, principal.id))
        raise_for_errors(validate(self.db, data, [password_field()]))

        user = self.get(principal.id)
        if not compare_password(data["password"], user.password):
            raise BadRequestError(USER_MESSAGES.PASSWORD_INCORRECT)
        return self.remove(user)

    @staticmethod
    def session_for(user: User) -> dict:
        payload = get_user_payload(user)
        return {"user": payload, "token": create_token(payload)}

    @staticmethod
    def refresh_session(principal: Principal) -> dict:
        payload = principal.to_payload()
        return {"user": payload, "token": create_token(payload)}
