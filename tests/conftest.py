"""Shared entity factories for unit and integration tests."""

import hashlib
import uuid
from collections.abc import Callable

import pytest

from data_design.domain.entities import Article, Clap, Profile

VALID_HASH = hashlib.sha512(b"correct horse battery staple").hexdigest()
VALID_SALT = hashlib.sha256(b"pepper").hexdigest()


@pytest.fixture
def make_profile() -> Callable[..., Profile]:
    def _make(**overrides) -> Profile:
        fields = {
            "id": uuid.uuid4(),
            "display_name": "andrewc",
            "first_name": "Andrew",
            "last_name": "Candelaria",
            "phone": "+1 505 555 0134",
            "email": "andrewc@example.com",
            "password_hash": VALID_HASH,
            "password_salt": VALID_SALT,
        }
        fields.update(overrides)
        return Profile(**fields)

    return _make


@pytest.fixture
def make_article() -> Callable[..., Article]:
    def _make(**overrides) -> Article:
        fields = {
            "id": uuid.uuid4(),
            "author_id": uuid.uuid4(),
            "content": "Hispanic art in New Mexico is alive and well.",
            "title": "Painting the Rio Grande",
            "published_at": "2018-01-02 03:04:05.123456",
        }
        fields.update(overrides)
        return Article(**fields)

    return _make


@pytest.fixture
def make_clap() -> Callable[..., Clap]:
    def _make(**overrides) -> Clap:
        fields = {
            "id": uuid.uuid4(),
            "profile_id": uuid.uuid4(),
            "article_id": uuid.uuid4(),
            "clapped_at": "2018-01-03 10:00:00",
        }
        fields.update(overrides)
        return Clap(**fields)

    return _make
