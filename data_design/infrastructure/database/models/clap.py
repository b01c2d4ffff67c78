"""SQLAlchemy ORM model for the Clap entity."""

from datetime import datetime

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from data_design.infrastructure.database.base import Base
from data_design.infrastructure.database.models.types import Identifier, Timestamp


class ClapModel(Base):
    """ORM model: maps to the 'clap' table."""

    __tablename__ = "clap"

    id: Mapped[bytes] = mapped_column("clapId", Identifier, primary_key=True)
    profile_id: Mapped[bytes] = mapped_column(
        "clapProfileId",
        Identifier,
        ForeignKey("profile.profileId"),
        nullable=False,
        index=True,
    )
    article_id: Mapped[bytes] = mapped_column(
        "clapArticleId",
        Identifier,
        ForeignKey("article.articleId"),
        nullable=False,
        index=True,
    )
    clapped_at: Mapped[datetime] = mapped_column("clapDate", Timestamp, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<ClapModel(id={self.id.hex()}, "
            f"profile={self.profile_id.hex()}, article={self.article_id.hex()})>"
        )
