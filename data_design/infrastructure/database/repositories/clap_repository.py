"""Concrete repository implementation for Clap backed by SQLAlchemy."""

import logging
from datetime import timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from data_design.application.interfaces import ClapRepository
from data_design.domain.entities import Clap
from data_design.domain.exceptions import StorageError, ValidationError
from data_design.domain.validators import IdentifierInput, validate_identifier
from data_design.infrastructure.database.models import ClapModel
from data_design.infrastructure.database.repositories.errors import storage_errors

logger = logging.getLogger(__name__)


class SQLAlchemyClapRepository(ClapRepository):
    """Implements the ClapRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClapModel) -> Clap:
        """Map ORM model → domain entity, failing loudly on an invalid row."""
        try:
            return Clap(
                id=model.id,
                profile_id=model.profile_id,
                article_id=model.article_id,
                clapped_at=model.clapped_at,
            )
        except ValidationError as exc:
            logger.error("Stored clap row is invalid: %s", exc)
            raise StorageError("stored clap row is invalid", exc) from exc

    def _to_model(self, entity: Clap) -> ClapModel:
        """Map domain entity → ORM model (for insertion)."""
        return ClapModel(
            id=entity.id.bytes,
            profile_id=entity.profile_id.bytes,
            article_id=entity.article_id.bytes,
            clapped_at=entity.clapped_at.astimezone(timezone.utc).replace(tzinfo=None),
        )

    async def insert(self, clap: Clap) -> None:
        with storage_errors(logger, f"insert clap {clap.id}"):
            self._session.add(self._to_model(clap))
            await self._session.flush()
        logger.info(
            "Inserted clap %s (profile=%s, article=%s)",
            clap.id,
            clap.profile_id,
            clap.article_id,
        )

    async def delete(self, clap: Clap) -> bool:
        stmt = (
            delete(ClapModel)
            .where(ClapModel.id == clap.id.bytes)
            .where(ClapModel.profile_id == clap.profile_id.bytes)
            .where(ClapModel.article_id == clap.article_id.bytes)
        )
        with storage_errors(logger, f"delete clap {clap.id}"):
            result = await self._session.execute(stmt)
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Deleted clap %s", clap.id)
        return deleted

    async def find_by_composite_key(
        self,
        profile_id: IdentifierInput,
        clap_id: IdentifierInput,
        article_id: IdentifierInput,
    ) -> Clap | None:
        profile_key = validate_identifier(profile_id, "profile_id")
        clap_key = validate_identifier(clap_id, "clap_id")
        article_key = validate_identifier(article_id, "article_id")
        stmt = (
            select(ClapModel)
            .where(ClapModel.profile_id == profile_key.bytes)
            .where(ClapModel.id == clap_key.bytes)
            .where(ClapModel.article_id == article_key.bytes)
        )
        logger.debug("Looking up clap %s", clap_key)
        with storage_errors(logger, f"find clap {clap_key}"):
            result = await self._session.execute(stmt)
            model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def find_by_profile_id(self, profile_id: IdentifierInput) -> list[Clap]:
        key = validate_identifier(profile_id, "profile_id")
        stmt = select(ClapModel).where(ClapModel.profile_id == key.bytes)
        return await self._find_many(stmt, f"find claps by profile {key}")

    async def find_by_article_id(self, article_id: IdentifierInput) -> list[Clap]:
        key = validate_identifier(article_id, "article_id")
        stmt = select(ClapModel).where(ClapModel.article_id == key.bytes)
        return await self._find_many(stmt, f"find claps for article {key}")

    async def find_by_clap_id(self, clap_id: IdentifierInput) -> list[Clap]:
        key = validate_identifier(clap_id, "clap_id")
        stmt = select(ClapModel).where(ClapModel.id == key.bytes)
        return await self._find_many(stmt, f"find claps with id {key}")

    async def _find_many(self, stmt, action: str) -> list[Clap]:
        stmt = stmt.order_by(ClapModel.clapped_at, ClapModel.id)
        logger.debug("Running clap query: %s", action)
        with storage_errors(logger, action):
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]
