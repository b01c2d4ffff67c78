"""Pydantic projection of the Clap entity."""

from pydantic import BaseModel, field_validator

from .projection import canonical_identifier, epoch_millis


class ClapResponse(BaseModel):
    """Schema returned to external consumers."""

    id: str
    profile_id: str
    article_id: str
    clapped_at: int

    model_config = {"from_attributes": True}

    @field_validator("id", "profile_id", "article_id", mode="before")
    @classmethod
    def _render_ids(cls, value: object) -> object:
        return canonical_identifier(value)

    @field_validator("clapped_at", mode="before")
    @classmethod
    def _render_clapped_at(cls, value: object) -> object:
        return epoch_millis(value)
