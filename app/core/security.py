import logging
import bcrypt
import jwt
from datetime import datetime, timezone
from app.core.config import settings

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def encrypt_password(password: str) -> str:
    """Hash a password with a fresh bcrypt salt."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8")[:BCRYPT_MAX_BYTES], salt).decode("utf-8")


def compare_password(password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(
            password.encode("utf-8")[:BCRYPT_MAX_BYTES], hashed_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("⚠️ Stored password hash could not be parsed")
        return False


def get_user_payload(user) -> dict:
    """Claims describing a user, as embedded in tokens and returned to clients."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role.value if hasattr(user.role, "value") else user.role,
        "createdAt": user.created_at.isoformat() if user.created_at else None,
        "updatedAt": user.updated_at.isoformat() if user.updated_at else None,
    }


def create_token(user_payload: dict) -> str:
    """Sign the user payload, adding issued-at and expiry claims."""
    now = datetime.now(timezone.utc)
    claims = {
        **{key: value for key, value in user_payload.items() if key not in ("iat", "exp")},
        "iat": now,
        "exp": now + settings.JWT_EXPIRES_IN,
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> dict:
    """
    Decode a token, checking its signature and expiry.

    Raises jwt.PyJWTError (ExpiredSignatureError, InvalidSignatureError, ...)
    when the token can't be trusted.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "iat"]},
    )
