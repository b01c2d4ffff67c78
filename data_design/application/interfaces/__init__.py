from .profile_repository import ProfileRepository
from .article_repository import ArticleRepository
from .clap_repository import ClapRepository

__all__ = [
    "ProfileRepository",
    "ArticleRepository",
    "ClapRepository",
]
