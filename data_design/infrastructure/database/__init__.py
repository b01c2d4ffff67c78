from .base import Base
from .session import (
    async_session_factory,
    build_engine,
    create_schema,
    drop_schema,
    engine,
    session_scope,
)
from .models import ArticleModel, ClapModel, ProfileModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "build_engine",
    "session_scope",
    "create_schema",
    "drop_schema",
    "ProfileModel",
    "ArticleModel",
    "ClapModel",
]
