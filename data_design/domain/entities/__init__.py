from .profile import Profile, hash_password
from .article import Article
from .clap import Clap

__all__ = [
    "Profile",
    "hash_password",
    "Article",
    "Clap",
]
