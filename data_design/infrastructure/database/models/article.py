"""SQLAlchemy ORM model for the Article entity."""

from datetime import datetime

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from data_design.infrastructure.database.base import Base
from data_design.infrastructure.database.models.types import Identifier, Timestamp


class ArticleModel(Base):
    """ORM model: maps to the 'article' table."""

    __tablename__ = "article"

    id: Mapped[bytes] = mapped_column("articleId", Identifier, primary_key=True)
    author_id: Mapped[bytes] = mapped_column(
        "articleProfileId",
        Identifier,
        ForeignKey("profile.profileId"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column("articleContent", String(12000), nullable=False)
    title: Mapped[str] = mapped_column("articleTitle", String(255), nullable=False)
    published_at: Mapped[datetime] = mapped_column("articleDateTime", Timestamp, nullable=False)

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id.hex()}, title='{self.title}')>"
