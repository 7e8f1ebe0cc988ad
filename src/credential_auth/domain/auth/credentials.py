"""Credential entity and adapters for caller-owned user records."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Final

from credential_auth.domain.auth.errors import InvalidInputError


@dataclass(frozen=True)
class Credential:
    """Stored password credential: hex derived key plus base64 salt."""

    hash: str
    salt: str


@dataclass(frozen=True)
class CredentialFields:
    """Names of the hash and salt fields on a user record."""

    hash_field: str
    salt_field: str


CANONICAL_FIELDS: Final = CredentialFields(hash_field="hash", salt_field="salt")
LEGACY_FIELDS: Final = CredentialFields(hash_field="pass", salt_field="salt")


def _read_field(record: object, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _write_field(record: object, name: str, value: str) -> None:
    if isinstance(record, MutableMapping):
        record[name] = value
    else:
        setattr(record, name, value)


def read_credential(record: object, *, fields: CredentialFields = CANONICAL_FIELDS) -> Credential:
    """Read the credential pair from a mapping or attribute-style user record."""

    if isinstance(record, Credential):
        return record

    password_hash = _read_field(record, fields.hash_field)
    salt = _read_field(record, fields.salt_field)
    if not (password_hash and salt):
        raise InvalidInputError("hash and salt are required")
    return Credential(hash=password_hash, salt=salt)


def write_credential(
    record: object,
    credential: Credential,
    *,
    fields: CredentialFields = CANONICAL_FIELDS,
) -> None:
    """Overwrite hash and salt on a user record in place, always as a pair."""

    _write_field(record, fields.hash_field, credential.hash)
    _write_field(record, fields.salt_field, credential.salt)
