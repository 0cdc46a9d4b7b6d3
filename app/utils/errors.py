"""Custom error definitions for API exceptions."""
from fastapi import HTTPException
from starlette import status

from app.core.constants import USER_NOT_FOUND


class APIError(HTTPException):
    """Base for errors rendered as ``{"error": detail}``."""


class UserNotFoundError(APIError):
    def __init__(self, detail: str = USER_NOT_FOUND):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
