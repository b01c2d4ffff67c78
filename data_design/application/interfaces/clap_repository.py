"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod

from data_design.domain.entities import Clap
from data_design.domain.validators import IdentifierInput


class ClapRepository(ABC):
    """Port for clap persistence: claps are never updated once stored."""

    @abstractmethod
    async def insert(self, clap: Clap) -> None:
        """Persist a new clap."""
        ...

    @abstractmethod
    async def delete(self, clap: Clap) -> bool:
        """Delete the clap matching id, profile and article. Returns True if deleted."""
        ...

    @abstractmethod
    async def find_by_composite_key(
        self,
        profile_id: IdentifierInput,
        clap_id: IdentifierInput,
        article_id: IdentifierInput,
    ) -> Clap | None:
        """Retrieve the clap matching all three identifiers."""
        ...

    @abstractmethod
    async def find_by_profile_id(self, profile_id: IdentifierInput) -> list[Clap]:
        """Retrieve every clap a profile has made."""
        ...

    @abstractmethod
    async def find_by_article_id(self, article_id: IdentifierInput) -> list[Clap]:
        """Retrieve every clap an article has received."""
        ...

    @abstractmethod
    async def find_by_clap_id(self, clap_id: IdentifierInput) -> list[Clap]:
        """Retrieve claps by their own id."""
        ...
