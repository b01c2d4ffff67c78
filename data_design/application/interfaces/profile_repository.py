"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod

from data_design.domain.entities import Profile
from data_design.domain.validators import IdentifierInput


class ProfileRepository(ABC):
    """Port for profile persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def insert(self, profile: Profile) -> None:
        """Persist a new profile."""
        ...

    @abstractmethod
    async def update(self, profile: Profile) -> None:
        """Overwrite the stored row that has the profile's id."""
        ...

    @abstractmethod
    async def delete(self, profile: Profile) -> bool:
        """Delete the profile. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def find_by_id(self, profile_id: IdentifierInput) -> Profile | None:
        """Retrieve a single profile by its id."""
        ...

    @abstractmethod
    async def find_by_display_name(self, display_name: str) -> Profile | None:
        """Retrieve the profile whose display name matches exactly."""
        ...

    @abstractmethod
    async def find_by_email(self, email: str) -> Profile | None:
        """Retrieve the profile whose email matches exactly."""
        ...
