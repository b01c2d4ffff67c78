"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod

from data_design.domain.entities import Article
from data_design.domain.validators import IdentifierInput


class ArticleRepository(ABC):
    """Port for article persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def insert(self, article: Article) -> None:
        """Persist a new article."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> None:
        """Overwrite the stored row that has the article's id."""
        ...

    @abstractmethod
    async def delete(self, article: Article) -> bool:
        """Delete the article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def find_by_id(self, article_id: IdentifierInput) -> Article | None:
        """Retrieve a single article by its id."""
        ...

    @abstractmethod
    async def find_by_author_id(self, author_id: IdentifierInput) -> list[Article]:
        """Retrieve every article written by a profile, newest first."""
        ...

    @abstractmethod
    async def find_by_content(self, text: str) -> list[Article]:
        """Retrieve articles whose content contains ``text`` literally."""
        ...

    @abstractmethod
    async def find_by_title(self, text: str) -> list[Article]:
        """Retrieve articles whose title contains ``text`` literally."""
        ...
