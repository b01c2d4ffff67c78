"""Domain entity: content written by a Profile."""

import uuid
from datetime import datetime, timezone

from data_design.domain.validators import (
    IdentifierInput,
    TimestampInput,
    validate_identifier,
    validate_text,
    validate_timestamp,
)

CONTENT_MAX_LENGTH = 12000
TITLE_MAX_LENGTH = 255


class Article:
    """Core domain entity representing a published article.

    ``author_id`` references the writing Profile; the store enforces that
    the profile exists.
    """

    def __init__(
        self,
        id: IdentifierInput,
        author_id: IdentifierInput,
        content: str,
        title: str,
        published_at: TimestampInput | None = None,
    ):
        self.id = id
        self.author_id = author_id
        self.content = content
        self.title = title
        self.published_at = published_at

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @id.setter
    def id(self, value: IdentifierInput) -> None:
        self._id = validate_identifier(value, "article_id")

    @property
    def author_id(self) -> uuid.UUID:
        return self._author_id

    @author_id.setter
    def author_id(self, value: IdentifierInput) -> None:
        self._author_id = validate_identifier(value, "author_id")

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str) -> None:
        self._content = validate_text(value, "content", CONTENT_MAX_LENGTH)

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = validate_text(value, "title", TITLE_MAX_LENGTH)

    @property
    def published_at(self) -> datetime:
        return self._published_at

    @published_at.setter
    def published_at(self, value: TimestampInput | None) -> None:
        if value is None:
            self._published_at = datetime.now(timezone.utc)
            return
        self._published_at = validate_timestamp(value, "published_at")

    def _fields(self) -> tuple:
        return (self.id, self.author_id, self.content, self.title, self.published_at)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Article):
            return NotImplemented
        return self._fields() == other._fields()

    def __repr__(self) -> str:
        return f"<Article(id={self.id}, title='{self.title}')>"
