import logging
from typing import Optional
import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ValidationError
from app.core.errors import (
    ForbiddenError,
    UnauthorizedError,
    FORBIDDEN_ERROR_MESSAGE,
    UNAUTHORIZED_ERROR_MESSAGE,
)
from app.core.security import verify_token
from app.users.models.user_model import Role

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class Principal(BaseModel):
    """The authenticated user of a request, as encoded in its token."""

    id: int
    name: str
    email: str
    role: Role
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_payload(self) -> dict:
        return self.model_dump(mode="json")


def get_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Principal]:
    """Resolve the bearer token, if any. A token that fails verification is a 401."""
    if credentials is None:
        return None

    try:
        claims = verify_token(credentials.credentials)
        return Principal.model_validate(claims)
    except (jwt.PyJWTError, ValidationError) as e:
        logger.warning(f"⚠️ Rejected bearer token: {e.__class__.__name__}")
        raise UnauthorizedError(UNAUTHORIZED_ERROR_MESSAGE)


def login_required(principal: Optional[Principal] = Depends(get_principal)) -> Principal:
    if principal is None:
        raise UnauthorizedError(UNAUTHORIZED_ERROR_MESSAGE)
    return principal


def admin_required(principal: Principal = Depends(login_required)) -> Principal:
    if not principal.is_admin:
        raise ForbiddenError(FORBIDDEN_ERROR_MESSAGE)
    return principal
