"""Pydantic projection of the Profile entity."""

from pydantic import BaseModel, field_validator

from .projection import canonical_identifier


class ProfileResponse(BaseModel):
    """Schema returned to external consumers: credentials are never exposed."""

    id: str
    display_name: str
    first_name: str
    last_name: str
    phone: str
    email: str

    model_config = {"from_attributes": True}

    @field_validator("id", mode="before")
    @classmethod
    def _render_id(cls, value: object) -> object:
        return canonical_identifier(value)
