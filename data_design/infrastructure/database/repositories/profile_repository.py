"""Concrete repository implementation for Profile backed by SQLAlchemy."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from data_design.application.interfaces import ProfileRepository
from data_design.domain.entities import Profile
from data_design.domain.entities.profile import DISPLAY_NAME_MAX_LENGTH, EMAIL_MAX_LENGTH
from data_design.domain.exceptions import StorageError, ValidationError
from data_design.domain.validators import (
    IdentifierInput,
    validate_email,
    validate_identifier,
    validate_text,
)
from data_design.infrastructure.database.models import ProfileModel
from data_design.infrastructure.database.repositories.errors import storage_errors

logger = logging.getLogger(__name__)


class SQLAlchemyProfileRepository(ProfileRepository):
    """Implements the ProfileRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Map ORM model → domain entity, failing loudly on an invalid row."""
        try:
            return Profile(
                id=model.id,
                display_name=model.display_name,
                first_name=model.first_name,
                last_name=model.last_name,
                phone=model.phone,
                email=model.email,
                password_hash=model.password_hash,
                password_salt=model.password_salt,
            )
        except ValidationError as exc:
            logger.error("Stored profile row is invalid: %s", exc)
            raise StorageError("stored profile row is invalid", exc) from exc

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Map domain entity → ORM model (for insertion)."""
        return ProfileModel(
            id=entity.id.bytes,
            display_name=entity.display_name,
            first_name=entity.first_name,
            last_name=entity.last_name,
            phone=entity.phone,
            email=entity.email,
            password_hash=entity.password_hash,
            password_salt=entity.password_salt,
        )

    async def insert(self, profile: Profile) -> None:
        with storage_errors(logger, f"insert profile {profile.id}"):
            self._session.add(self._to_model(profile))
            await self._session.flush()
        logger.info("Inserted profile %s (%s)", profile.id, profile.display_name)

    async def update(self, profile: Profile) -> None:
        with storage_errors(logger, f"update profile {profile.id}"):
            model = await self._session.get(ProfileModel, profile.id.bytes)
            if model is None:
                raise StorageError(f"profile {profile.id} not found in database")
            model.display_name = profile.display_name
            model.first_name = profile.first_name
            model.last_name = profile.last_name
            model.phone = profile.phone
            model.email = profile.email
            model.password_hash = profile.password_hash
            model.password_salt = profile.password_salt
            await self._session.flush()
        logger.info("Updated profile %s", profile.id)

    async def delete(self, profile: Profile) -> bool:
        with storage_errors(logger, f"delete profile {profile.id}"):
            model = await self._session.get(ProfileModel, profile.id.bytes)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        logger.info("Deleted profile %s", profile.id)
        return True

    async def find_by_id(self, profile_id: IdentifierInput) -> Profile | None:
        key = validate_identifier(profile_id, "profile_id")
        logger.debug("Looking up profile by id %s", key)
        with storage_errors(logger, f"find profile {key}"):
            model = await self._session.get(ProfileModel, key.bytes)
        return self._to_entity(model) if model else None

    async def find_by_display_name(self, display_name: str) -> Profile | None:
        display_name = validate_text(display_name, "display_name", DISPLAY_NAME_MAX_LENGTH)
        logger.debug("Looking up profile by display name '%s'", display_name)
        stmt = select(ProfileModel).where(ProfileModel.display_name == display_name)
        return await self._find_one(stmt, f"find profile named '{display_name}'")

    async def find_by_email(self, email: str) -> Profile | None:
        email = validate_email(email, "email", EMAIL_MAX_LENGTH)
        logger.debug("Looking up profile by email '%s'", email)
        stmt = select(ProfileModel).where(ProfileModel.email == email)
        return await self._find_one(stmt, f"find profile with email '{email}'")

    async def _find_one(self, stmt, action: str) -> Profile | None:
        with storage_errors(logger, action):
            result = await self._session.execute(stmt.limit(1))
            model = result.scalars().first()
        return self._to_entity(model) if model else None
