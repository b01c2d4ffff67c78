"""Domain entity: an append-only appreciation event."""

import uuid
from datetime import datetime, timezone

from data_design.domain.validators import (
    IdentifierInput,
    TimestampInput,
    validate_identifier,
    validate_timestamp,
)


class Clap:
    """A Profile clapping for an Article at a point in time.

    Claps are never updated once stored; they are only inserted or deleted.
    """

    def __init__(
        self,
        id: IdentifierInput,
        profile_id: IdentifierInput,
        article_id: IdentifierInput,
        clapped_at: TimestampInput | None = None,
    ):
        self.id = id
        self.profile_id = profile_id
        self.article_id = article_id
        self.clapped_at = clapped_at

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @id.setter
    def id(self, value: IdentifierInput) -> None:
        self._id = validate_identifier(value, "clap_id")

    @property
    def profile_id(self) -> uuid.UUID:
        return self._profile_id

    @profile_id.setter
    def profile_id(self, value: IdentifierInput) -> None:
        self._profile_id = validate_identifier(value, "profile_id")

    @property
    def article_id(self) -> uuid.UUID:
        return self._article_id

    @article_id.setter
    def article_id(self, value: IdentifierInput) -> None:
        self._article_id = validate_identifier(value, "article_id")

    @property
    def clapped_at(self) -> datetime:
        return self._clapped_at

    @clapped_at.setter
    def clapped_at(self, value: TimestampInput | None) -> None:
        if value is None:
            self._clapped_at = datetime.now(timezone.utc)
            return
        self._clapped_at = validate_timestamp(value, "clapped_at")

    def _fields(self) -> tuple:
        return (self.id, self.profile_id, self.article_id, self.clapped_at)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clap):
            return NotImplemented
        return self._fields() == other._fields()

    def __repr__(self) -> str:
        return (
            f"<Clap(id={self.id}, "
            f"profile_id={self.profile_id}, article_id={self.article_id})>"
        )
