from .profile_repository import SQLAlchemyProfileRepository
from .article_repository import SQLAlchemyArticleRepository
from .clap_repository import SQLAlchemyClapRepository

__all__ = [
    "SQLAlchemyProfileRepository",
    "SQLAlchemyArticleRepository",
    "SQLAlchemyClapRepository",
]
