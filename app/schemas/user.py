"""User profile request/response schemas."""
from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    """A single profile record.

    Every field defaults to an empty string, so a body that omits a field
    decodes to ``""`` for it. The display name is read and written only
    under its wire name ``fullName``; construct records with
    ``UserProfile(fullName=...)``.
    """

    id: str = ""
    full_name: str = Field("", alias="fullName")
    emoji: str = ""

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
