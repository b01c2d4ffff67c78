from .profile import ProfileModel
from .article import ArticleModel
from .clap import ClapModel

__all__ = [
    "ProfileModel",
    "ArticleModel",
    "ClapModel",
]
