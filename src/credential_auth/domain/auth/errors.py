"""Error taxonomy shared by credential hashing and verification."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from credential_auth.domain.auth.strength_policy import StrengthReport


class FailureClass(StrEnum):
    """Who caused a failed credential operation."""

    CLIENT = "client"
    SERVER = "server"


class CredentialError(Exception):
    """Base class for every credential operation failure."""

    failure_class: FailureClass = FailureClass.SERVER


class InvalidInputError(CredentialError, ValueError):
    """Raised when a password, hash, salt or record is missing."""

    failure_class = FailureClass.CLIENT


class WeakPasswordError(CredentialError, ValueError):
    """Raised when a password does not meet minimum strength requirements."""

    failure_class = FailureClass.CLIENT

    def __init__(self, *, report: StrengthReport | None = None) -> None:
        super().__init__("password does not meet minimum requirements")
        self.report = report


class InternalCryptoFailureError(CredentialError, RuntimeError):
    """Raised when the key-derivation primitive or entropy source fails."""

    failure_class = FailureClass.SERVER

    def __init__(self, message: str = "could not hash password") -> None:
        super().__init__(message)
