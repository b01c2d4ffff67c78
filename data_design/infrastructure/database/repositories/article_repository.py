"""Concrete repository implementation for Article backed by SQLAlchemy."""

import logging
from datetime import timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from data_design.application.interfaces import ArticleRepository
from data_design.domain.entities import Article
from data_design.domain.entities.article import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH
from data_design.domain.exceptions import StorageError, ValidationError
from data_design.domain.validators import IdentifierInput, validate_identifier, validate_text
from data_design.infrastructure.database.models import ArticleModel
from data_design.infrastructure.database.repositories.errors import storage_errors

logger = logging.getLogger(__name__)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity, failing loudly on an invalid row."""
        try:
            return Article(
                id=model.id,
                author_id=model.author_id,
                content=model.content,
                title=model.title,
                published_at=model.published_at,
            )
        except ValidationError as exc:
            logger.error("Stored article row is invalid: %s", exc)
            raise StorageError("stored article row is invalid", exc) from exc

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for insertion)."""
        return ArticleModel(
            id=entity.id.bytes,
            author_id=entity.author_id.bytes,
            content=entity.content,
            title=entity.title,
            published_at=_naive_utc(entity),
        )

    async def insert(self, article: Article) -> None:
        with storage_errors(logger, f"insert article {article.id}"):
            self._session.add(self._to_model(article))
            await self._session.flush()
        logger.info("Inserted article %s by %s", article.id, article.author_id)

    async def update(self, article: Article) -> None:
        with storage_errors(logger, f"update article {article.id}"):
            model = await self._session.get(ArticleModel, article.id.bytes)
            if model is None:
                raise StorageError(f"article {article.id} not found in database")
            model.author_id = article.author_id.bytes
            model.content = article.content
            model.title = article.title
            model.published_at = _naive_utc(article)
            await self._session.flush()
        logger.info("Updated article %s", article.id)

    async def delete(self, article: Article) -> bool:
        with storage_errors(logger, f"delete article {article.id}"):
            model = await self._session.get(ArticleModel, article.id.bytes)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        logger.info("Deleted article %s", article.id)
        return True

    async def find_by_id(self, article_id: IdentifierInput) -> Article | None:
        key = validate_identifier(article_id, "article_id")
        logger.debug("Looking up article by id %s", key)
        with storage_errors(logger, f"find article {key}"):
            model = await self._session.get(ArticleModel, key.bytes)
        return self._to_entity(model) if model else None

    async def find_by_author_id(self, author_id: IdentifierInput) -> list[Article]:
        key = validate_identifier(author_id, "author_id")
        stmt = select(ArticleModel).where(ArticleModel.author_id == key.bytes)
        return await self._find_many(stmt, f"find articles by author {key}")

    async def find_by_content(self, text: str) -> list[Article]:
        text = validate_text(text, "content", CONTENT_MAX_LENGTH)
        # autoescape makes % and _ in the search text match literally
        stmt = select(ArticleModel).where(ArticleModel.content.contains(text, autoescape=True))
        return await self._find_many(stmt, "search article content")

    async def find_by_title(self, text: str) -> list[Article]:
        text = validate_text(text, "title", TITLE_MAX_LENGTH)
        stmt = select(ArticleModel).where(ArticleModel.title.contains(text, autoescape=True))
        return await self._find_many(stmt, "search article titles")

    async def _find_many(self, stmt, action: str) -> list[Article]:
        stmt = stmt.order_by(ArticleModel.published_at.desc(), ArticleModel.id)
        logger.debug("Running article query: %s", action)
        with storage_errors(logger, action):
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]


def _naive_utc(article: Article):
    return article.published_at.astimezone(timezone.utc).replace(tzinfo=None)
