"""Domain entity: a registered user of the publishing platform."""

import hashlib
import hmac
import secrets
import uuid

from data_design.domain.exceptions import ValidationError
from data_design.domain.validators import (
    IdentifierInput,
    validate_email,
    validate_hex,
    validate_identifier,
    validate_text,
)

DISPLAY_NAME_MAX_LENGTH = 32
NAME_MAX_LENGTH = 128
PHONE_MAX_LENGTH = 32
EMAIL_MAX_LENGTH = 128
PASSWORD_HASH_LENGTH = 128
PASSWORD_SALT_LENGTH = 64

_PBKDF2_ITERATIONS = 262144


def hash_password(password: str, salt: str | None = None) -> tuple[str, str]:
    """Derive the ``(hash, salt)`` hex pair a Profile stores for ``password``.

    A fresh 32-byte salt is generated when none is given. The hash is
    PBKDF2-HMAC-SHA512 over the hex salt text, 64 bytes rendered as hex.
    """
    if not isinstance(password, str) or not password.strip():
        raise ValidationError("password", "value is empty")
    if salt is None:
        salt = secrets.token_bytes(PASSWORD_SALT_LENGTH // 2).hex()
    else:
        salt = validate_hex(salt, "password_salt", PASSWORD_SALT_LENGTH)

    digest = hashlib.pbkdf2_hmac(
        "sha512",
        password.encode("utf-8"),
        salt.encode("ascii"),
        _PBKDF2_ITERATIONS,
    )
    return digest.hex(), salt


class Profile:
    """Core domain entity representing a registered user.

    Every attribute is a property whose setter validates before assigning,
    so a Profile instance never holds an invalid value. A failed assignment
    leaves the previous value in place.
    """

    def __init__(
        self,
        id: IdentifierInput,
        display_name: str,
        first_name: str,
        last_name: str,
        phone: str,
        email: str,
        password_hash: str,
        password_salt: str,
    ):
        self.id = id
        self.display_name = display_name
        self.first_name = first_name
        self.last_name = last_name
        self.phone = phone
        self.email = email
        self.password_hash = password_hash
        self.password_salt = password_salt

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @id.setter
    def id(self, value: IdentifierInput) -> None:
        self._id = validate_identifier(value, "profile_id")

    @property
    def display_name(self) -> str:
        return self._display_name

    @display_name.setter
    def display_name(self, value: str) -> None:
        self._display_name = validate_text(value, "display_name", DISPLAY_NAME_MAX_LENGTH)

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = validate_text(value, "first_name", NAME_MAX_LENGTH)

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = validate_text(value, "last_name", NAME_MAX_LENGTH)

    @property
    def phone(self) -> str:
        return self._phone

    @phone.setter
    def phone(self, value: str) -> None:
        self._phone = validate_text(value, "phone", PHONE_MAX_LENGTH)

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        self._email = validate_email(value, "email", EMAIL_MAX_LENGTH)

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @password_hash.setter
    def password_hash(self, value: str) -> None:
        self._password_hash = validate_hex(value, "password_hash", PASSWORD_HASH_LENGTH)

    @property
    def password_salt(self) -> str:
        return self._password_salt

    @password_salt.setter
    def password_salt(self, value: str) -> None:
        self._password_salt = validate_hex(value, "password_salt", PASSWORD_SALT_LENGTH)

    def set_password(self, password: str) -> None:
        """Replace the hash and salt with a fresh pair derived from ``password``."""
        password_hash, password_salt = hash_password(password)
        self._password_hash = password_hash
        self._password_salt = password_salt

    def verify_password(self, password: str) -> bool:
        """Check ``password`` against the stored hash in constant time."""
        try:
            candidate, _ = hash_password(password, self.password_salt)
        except ValidationError:
            return False
        return hmac.compare_digest(candidate, self.password_hash)

    def _fields(self) -> tuple:
        return (
            self.id,
            self.display_name,
            self.first_name,
            self.last_name,
            self.phone,
            self.email,
            self.password_hash,
            self.password_salt,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Profile):
            return NotImplemented
        return self._fields() == other._fields()

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, display_name='{self.display_name}')>"
