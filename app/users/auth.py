from typing import Optional

from fastapi import Depends, Request
from loguru import logger
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import Unauthorized
from app.security.passwords import verify_password
from app.security.tokens import ExpiredToken, InvalidToken, TokenService
from app.users import crud as user_crud
from app.users import schemas

NO_TOKEN = "Not authorized, no token"
TOKEN_FAILED = "Not authorized, token failed"


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def authenticate_user(db: Session, email: str, password: str):
    user = user_crud.get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer <token>`` header, else None."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


def resolve_identity(
    authorization: Optional[str],
    token_service: TokenService,
    db: Session,
) -> schemas.UserDisplaySchema:
    token = extract_bearer_token(authorization)
    if token is None:
        logger.warning("Rejected request: missing or malformed Authorization header")
        raise Unauthorized(NO_TOKEN)

    try:
        user_id = token_service.verify(token)
    except ExpiredToken:
        logger.warning("Rejected request: token expired")
        raise Unauthorized(TOKEN_FAILED)
    except InvalidToken as exc:
        logger.warning(f"Rejected request: invalid token ({exc})")
        raise Unauthorized(TOKEN_FAILED)

    user = user_crud.get_user_by_id(db, user_id)
    if not user:
        logger.warning(f"Rejected request: token subject {user_id} no longer exists")
        raise Unauthorized(TOKEN_FAILED)

    return schemas.UserDisplaySchema.model_validate(user)


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
) -> schemas.UserDisplaySchema:
    return resolve_identity(request.headers.get("Authorization"), token_service, db)
