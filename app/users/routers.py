from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import InvalidCredentials
from app.security.passwords import hash_password
from app.security.tokens import TokenService
from app.users import crud as user_crud, schemas
from app.users.auth import authenticate_user, get_current_user, get_token_service

router = APIRouter()


@router.post("/register", response_model=schemas.TokenSchema, status_code=status.HTTP_201_CREATED)
def sign_up(
    user: schemas.UserRegisterSchema,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
):
    # Normalize identifiers
    username = user.username.strip().lower()
    email = user.email.strip().lower()

    hashed_password = hash_password(user.password)
    new_user = user_crud.create_user(db, username, email, hashed_password)
    logger.info(f"User registered: {new_user.username} (id={new_user.id})")

    return {"token": token_service.issue(new_user.id)}


@router.post("/login", response_model=schemas.TokenSchema)
def login(
    credentials: schemas.UserLoginSchema,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
):
    email = credentials.email.strip().lower()

    user = authenticate_user(db, email, credentials.password)
    if not user:
        logger.warning(f"Authentication denied for email: {email}")
        raise InvalidCredentials()

    logger.info(f"User authenticated: {user.username}")
    return {"token": token_service.issue(user.id)}


@router.get("/me", response_model=schemas.UserDisplaySchema)
def get_current_user_info(
    current_user: schemas.UserDisplaySchema = Depends(get_current_user),
):
    return current_user
