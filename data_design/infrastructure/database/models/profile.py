"""SQLAlchemy ORM model for the Profile entity."""

from sqlalchemy import CHAR, String
from sqlalchemy.orm import Mapped, mapped_column

from data_design.infrastructure.database.base import Base
from data_design.infrastructure.database.models.types import Identifier


class ProfileModel(Base):
    """ORM model: maps to the 'profile' table."""

    __tablename__ = "profile"

    id: Mapped[bytes] = mapped_column("profileId", Identifier, primary_key=True)
    display_name: Mapped[str] = mapped_column("profileName", String(32), nullable=False, index=True)
    first_name: Mapped[str] = mapped_column("profileFirstName", String(128), nullable=False)
    last_name: Mapped[str] = mapped_column("profileLastName", String(128), nullable=False)
    phone: Mapped[str] = mapped_column("profilePhone", String(32), nullable=False)
    email: Mapped[str] = mapped_column("profileEmail", String(128), nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column("profileHash", CHAR(128), nullable=False)
    password_salt: Mapped[str] = mapped_column("profileSalt", CHAR(64), nullable=False)

    def __repr__(self) -> str:
        return f"<ProfileModel(id={self.id.hex()}, name='{self.display_name}')>"
