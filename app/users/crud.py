from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import DuplicateKey
from app.users.models import User


def create_user(db: Session, username: str, email: str, hashed_password: str):
    if get_user_by_email(db, email) or get_user_by_username(db, username):
        raise DuplicateKey()

    new_user = User(
        username=username,
        email=email,
        hashed_password=hashed_password,
    )
    try:
        db.add(new_user)
        db.commit()
    except IntegrityError as exc:
        # Lost a race against a concurrent registration
        db.rollback()
        raise DuplicateKey() from exc
    db.refresh(new_user)
    return new_user


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def get_user_by_username(db: Session, username: str):
    return db.query(User).filter(User.username == username).first()


def get_user_by_id(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()
