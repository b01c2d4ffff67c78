"""Integration tests for SQLAlchemyClapRepository against SQLite."""

import uuid

import pytest
import pytest_asyncio

from data_design.domain.exceptions import StorageError, ValidationError
from data_design.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyClapRepository,
    SQLAlchemyProfileRepository,
)
from data_design.infrastructure.database.session import session_scope


@pytest_asyncio.fixture
async def profile(session, make_profile):
    profile = make_profile()
    await SQLAlchemyProfileRepository(session).insert(profile)
    return profile


@pytest_asyncio.fixture
async def article(session, profile, make_article):
    article = make_article(author_id=profile.id)
    await SQLAlchemyArticleRepository(session).insert(article)
    return article


@pytest.mark.asyncio
async def test_clap_lifecycle_through_both_finders(session, profile, article, make_clap):
    repo = SQLAlchemyClapRepository(session)
    clap = make_clap(profile_id=profile.id, article_id=article.id)
    await repo.insert(clap)

    assert await repo.find_by_article_id(article.id) == [clap]
    assert await repo.find_by_profile_id(profile.id) == [clap]

    assert await repo.delete(clap) is True

    assert await repo.find_by_article_id(article.id) == []
    assert await repo.find_by_profile_id(profile.id) == []


@pytest.mark.asyncio
async def test_find_by_composite_key(session, profile, article, make_clap):
    repo = SQLAlchemyClapRepository(session)
    clap = make_clap(profile_id=profile.id, article_id=article.id)
    await repo.insert(clap)

    found = await repo.find_by_composite_key(str(profile.id), str(clap.id), str(article.id))
    assert found == clap
    assert await repo.find_by_composite_key(profile.id, clap.id, uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_find_by_clap_id(session, profile, article, make_clap):
    repo = SQLAlchemyClapRepository(session)
    clap = make_clap(profile_id=profile.id, article_id=article.id)
    await repo.insert(clap)

    assert await repo.find_by_clap_id(clap.id.bytes) == [clap]
    assert await repo.find_by_clap_id(uuid.uuid4()) == []


@pytest.mark.asyncio
async def test_claps_are_listed_oldest_first(session, profile, article, make_clap):
    repo = SQLAlchemyClapRepository(session)
    second = make_clap(profile_id=profile.id, article_id=article.id, clapped_at="2018-02-01 00:00:00")
    first = make_clap(profile_id=profile.id, article_id=article.id, clapped_at="2018-01-01 00:00:00")
    await repo.insert(second)
    await repo.insert(first)

    assert await repo.find_by_article_id(article.id) == [first, second]


@pytest.mark.asyncio
async def test_delete_requires_matching_profile_and_article(session, profile, article, make_clap):
    repo = SQLAlchemyClapRepository(session)
    clap = make_clap(profile_id=profile.id, article_id=article.id)
    await repo.insert(clap)

    stranger = make_clap(id=clap.id, profile_id=uuid.uuid4(), article_id=article.id)
    assert await repo.delete(stranger) is False
    assert await repo.find_by_clap_id(clap.id) == [clap]


@pytest.mark.asyncio
async def test_clap_for_unknown_article_is_a_storage_error(session, profile, make_clap):
    with pytest.raises(StorageError):
        await SQLAlchemyClapRepository(session).insert(
            make_clap(profile_id=profile.id, article_id=uuid.uuid4())
        )


@pytest.mark.asyncio
async def test_finders_validate_identifiers(session):
    repo = SQLAlchemyClapRepository(session)
    with pytest.raises(ValidationError):
        await repo.find_by_profile_id("not-a-uuid")
    with pytest.raises(ValidationError):
        await repo.find_by_composite_key(uuid.uuid4(), b"short", uuid.uuid4())


@pytest.mark.asyncio
async def test_committed_clap_is_visible_to_a_new_session(session_factory, make_profile, make_article, make_clap):
    profile = make_profile()
    article = make_article(author_id=profile.id)
    clap = make_clap(profile_id=profile.id, article_id=article.id, clapped_at=None)

    async with session_scope(session_factory) as session:
        await SQLAlchemyProfileRepository(session).insert(profile)
        await SQLAlchemyArticleRepository(session).insert(article)
        await SQLAlchemyClapRepository(session).insert(clap)

    async with session_scope(session_factory) as session:
        assert await SQLAlchemyClapRepository(session).find_by_article_id(article.id) == [clap]
