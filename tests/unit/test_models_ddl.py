"""DDL emitted for the ORM models on the MySQL dialect."""

import pytest
from sqlalchemy.dialects import mysql, sqlite
from sqlalchemy.schema import CreateTable

from data_design.infrastructure.database.models import ArticleModel, ClapModel, ProfileModel


def _mysql_ddl(model) -> str:
    return str(CreateTable(model.__table__).compile(dialect=mysql.dialect()))


@pytest.mark.parametrize(
    ("model", "columns"),
    [
        (ProfileModel, ["profileId"]),
        (ArticleModel, ["articleId", "articleProfileId"]),
        (ClapModel, ["clapId", "clapProfileId", "clapArticleId"]),
    ],
)
def test_identifiers_are_binary_16_on_mysql(model, columns):
    ddl = _mysql_ddl(model)

    assert "BLOB" not in ddl
    for column in columns:
        assert f"`{column}` BINARY(16)" in ddl


def test_timestamps_keep_microseconds_on_mysql():
    assert "`articleDateTime` DATETIME(6)" in _mysql_ddl(ArticleModel)
    assert "`clapDate` DATETIME(6)" in _mysql_ddl(ClapModel)


def test_identifiers_stay_binary_blobs_on_sqlite():
    ddl = str(CreateTable(ProfileModel.__table__).compile(dialect=sqlite.dialect()))

    assert "BLOB" in ddl
