from .profile import ProfileResponse
from .article import ArticleResponse
from .clap import ClapResponse

__all__ = [
    "ProfileResponse",
    "ArticleResponse",
    "ClapResponse",
]
