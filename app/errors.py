from typing import Optional


class AppError(Exception):
    """Base error mapped to a JSON ``{"message": ...}`` response."""

    status_code = 500
    message = "Server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    message = "Invalid request"


class DuplicateKey(AppError):
    status_code = 400
    message = "User already exists"


class InvalidCredentials(AppError):
    status_code = 400
    message = "Invalid credentials"


class Unauthorized(AppError):
    status_code = 401
    message = "Not authorized, token failed"


class Forbidden(AppError):
    # Ownership failures are reported as 401 on the wire
    status_code = 401
    message = "User not authorized"


class NotFound(AppError):
    status_code = 404
    message = "Expense not found"


class InternalError(AppError):
    status_code = 500
    message = "Server error"
