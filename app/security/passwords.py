from loguru import logger
from passlib.context import CryptContext

from app.errors import InternalError

# bcrypt with a fixed work factor; the salt is embedded in every hash
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def hash_password(plain_password: str) -> str:
    """Return a salted bcrypt hash for plain_password."""
    try:
        return pwd_context.hash(plain_password)
    except (ValueError, TypeError) as exc:
        logger.error(f"Password hashing failed: {exc.__class__.__name__}")
        raise InternalError() from exc


def verify_password(plain_password: str, stored_hash: str) -> bool:
    """Verify a candidate password against a stored bcrypt hash."""
    if not stored_hash:
        return False
    try:
        return pwd_context.verify(plain_password, stored_hash)
    except (ValueError, TypeError):
        # Unrecognised or corrupt hash
        return False
