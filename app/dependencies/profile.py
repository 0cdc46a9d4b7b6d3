"""Request body decoding for user profile writes.

The body is always decoded as JSON, whatever the Content-Type header says.
A JSON ``null`` decodes to an empty profile; a request with no body at all
is rejected.
"""
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import TypeAdapter, ValidationError

from app.schemas.user import UserProfile

_profile_adapter = TypeAdapter(Optional[UserProfile])

# Used by the write routes, which read the body themselves.
PROFILE_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": UserProfile.model_json_schema(by_alias=True)}},
    }
}


async def profile_body(request: Request) -> UserProfile:
    raw = await request.body()
    if not raw.strip():
        raise RequestValidationError(
            [{"type": "missing", "loc": ("body",), "msg": "Request body is empty"}]
        )
    try:
        profile = _profile_adapter.validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in e.errors()]
        ) from e
    return profile if profile is not None else UserProfile()
