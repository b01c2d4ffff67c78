"""Unit tests for the JSON projections of the entities."""

import uuid
from datetime import datetime, timedelta, timezone

from data_design.application.schemas import ArticleResponse, ClapResponse, ProfileResponse

_BASE_MILLIS = int(datetime(2018, 1, 2, 3, 4, 5, tzinfo=timezone.utc).timestamp()) * 1000


def test_article_projection_uses_canonical_ids_and_epoch_millis(make_article):
    article_id = uuid.uuid4()
    article = make_article(id=article_id, published_at="2018-01-02 03:04:05.123500")

    data = ArticleResponse.model_validate(article, from_attributes=True).model_dump()

    assert data["id"] == str(article_id)
    assert data["author_id"] == str(article.author_id)
    assert data["published_at"] == _BASE_MILLIS + 124
    assert data["title"] == article.title


def test_epoch_millis_rounds_down_below_half(make_article):
    article = make_article(published_at="2018-01-02 03:04:05.123499")
    data = ArticleResponse.model_validate(article, from_attributes=True)
    assert data.published_at == _BASE_MILLIS + 123


def test_epoch_millis_respects_timezone(make_article):
    offset = timezone(timedelta(hours=2))
    article = make_article(published_at=datetime(2018, 1, 2, 5, 4, 5, tzinfo=offset))
    data = ArticleResponse.model_validate(article, from_attributes=True)
    assert data.published_at == _BASE_MILLIS


def test_clap_projection(make_clap):
    clap = make_clap(clapped_at="2018-01-02 03:04:05")
    data = ClapResponse.model_validate(clap, from_attributes=True).model_dump()

    assert data == {
        "id": str(clap.id),
        "profile_id": str(clap.profile_id),
        "article_id": str(clap.article_id),
        "clapped_at": _BASE_MILLIS,
    }


def test_profile_projection_hides_credentials(make_profile):
    profile = make_profile()
    data = ProfileResponse.model_validate(profile, from_attributes=True).model_dump()

    assert data["id"] == str(profile.id)
    assert data["display_name"] == "andrewc"
    assert "password_hash" not in data
    assert "password_salt" not in data
