"""Pydantic projection of the Article entity."""

from pydantic import BaseModel, field_validator

from .projection import canonical_identifier, epoch_millis


class ArticleResponse(BaseModel):
    """Schema returned to external consumers."""

    id: str
    author_id: str
    content: str
    title: str
    published_at: int

    model_config = {"from_attributes": True}

    @field_validator("id", "author_id", mode="before")
    @classmethod
    def _render_ids(cls, value: object) -> object:
        return canonical_identifier(value)

    @field_validator("published_at", mode="before")
    @classmethod
    def _render_published_at(cls, value: object) -> object:
        return epoch_millis(value)
