from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


# -------- USERS --------
class UserRegisterSchema(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("username", "email", mode="before")
    @classmethod
    def strip_identifiers(cls, v):
        # Passwords are left untouched
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v):
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"must be at most {BCRYPT_MAX_BYTES} bytes")
        return v


class UserLoginSchema(BaseModel):
    # Plain str: a malformed email is just an unknown login
    email: str
    password: str


class TokenSchema(BaseModel):
    token: str


class UserDisplaySchema(BaseModel):
    """Authenticated identity handed to route handlers. Never carries the hash."""
    id: int
    username: str
    email: str
    created_at: datetime

    class Config:
        from_attributes = True
