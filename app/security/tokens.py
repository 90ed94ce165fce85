"""
Signed, time-limited identity tokens.

Tokens are HS256 JWTs carrying the user id in ``sub`` plus ``iat``/``exp``.
They are stateless: nothing is stored server side, so changing SECRET_KEY
invalidates every token issued before the change.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt


class TokenError(Exception):
    pass


class InvalidToken(TokenError):
    """Malformed token, bad signature or unusable subject."""


class ExpiredToken(TokenError):
    """Signature is fine but the expiry has elapsed."""


class TokenService:
    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=1),
    ):
        if not secret_key:
            raise ValueError("secret_key is required")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(self, user_id: int, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": str(user_id),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except ExpiredSignatureError as exc:
            raise ExpiredToken("Token has expired") from exc
        except JWTError as exc:
            raise InvalidToken(str(exc)) from exc

        subject = payload.get("sub")
        if subject is None:
            raise InvalidToken("Token has no subject")
        try:
            return int(subject)
        except (TypeError, ValueError) as exc:
            raise InvalidToken("Token subject is not a user id") from exc
