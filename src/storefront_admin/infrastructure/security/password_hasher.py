"""Scrypt password hasher adapter.

Stored records have the form ``<key_hex>.<salt_hex>``: a 64-byte scrypt key
and a 16-byte random salt, both hex encoded. The scrypt salt input is the
ASCII text of ``salt_hex``, which keeps records interchangeable with the ones
written by the previous Node.js deployment (``crypto.scrypt`` defaults).
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import re
import secrets
from collections.abc import Callable
from dataclasses import dataclass

from storefront_admin.application.ports.password_hasher_port import PasswordHasherPort

RECORD_DELIMITER = "."
SALT_BYTES = 16
KEY_BYTES = 64
SCRYPT_N = 16_384
SCRYPT_R = 8
SCRYPT_P = 1
_SCRYPT_MAXMEM = 64 * 1024 * 1024
_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})+")

logger = logging.getLogger(__name__)


class MalformedPasswordRecordError(ValueError):
    """Raised when a stored record does not split into two hex components."""


class PasswordHashingError(RuntimeError):
    """Raised when a usable password record cannot be produced."""


@dataclass(frozen=True)
class PasswordRecord:
    """Decoded parts of one stored password record."""

    key: bytes
    salt_hex: str


def parse_password_record(record: str) -> PasswordRecord:
    """Split one stored record into raw key bytes and the hex salt text."""

    parts = record.split(RECORD_DELIMITER)
    if len(parts) != 2:
        raise MalformedPasswordRecordError("expected exactly one delimiter")

    key_hex, salt_hex = parts
    if _HEX_RE.fullmatch(key_hex) is None:
        raise MalformedPasswordRecordError("key is not hex encoded")
    if _HEX_RE.fullmatch(salt_hex) is None:
        raise MalformedPasswordRecordError("salt is not hex encoded")

    return PasswordRecord(key=bytes.fromhex(key_hex), salt_hex=salt_hex)


class ScryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using scrypt and constant-time comparison.

    Both operations are CPU and memory heavy and hold no mutable state, so one
    instance can be shared across threads. Async callers should dispatch them
    with ``asyncio.to_thread``.
    """

    def __init__(
        self,
        *,
        n: int = SCRYPT_N,
        r: int = SCRYPT_R,
        p: int = SCRYPT_P,
        key_bytes: int = KEY_BYTES,
        salt_bytes: int = SALT_BYTES,
        random_bytes: Callable[[int], bytes] = secrets.token_bytes,
    ) -> None:
        self._n = n
        self._r = r
        self._p = p
        self._key_bytes = key_bytes
        self._salt_bytes = salt_bytes
        self._random_bytes = random_bytes

    def hash_password(self, password: str) -> str:
        if not password:
            raise ValueError("password cannot be empty")

        salt = self._random_bytes(self._salt_bytes)
        if len(salt) != self._salt_bytes:
            raise PasswordHashingError("random source returned a short salt")
        salt_hex = salt.hex()

        key = self._derive(password=password, salt_hex=salt_hex)
        if len(key) != self._key_bytes:
            raise PasswordHashingError("key derivation returned an unexpected length")
        return f"{key.hex()}{RECORD_DELIMITER}{salt_hex}"

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            record = parse_password_record(password_hash)
        except MalformedPasswordRecordError as exc:
            logger.warning("password_record_malformed reason=%s", exc)
            return False

        try:
            derived = self._derive(password=password, salt_hex=record.salt_hex)
        except Exception as exc:  # noqa: BLE001 - verification fails closed
            logger.warning("password_derivation_failed error=%s", type(exc).__name__)
            return False

        if len(derived) != len(record.key):
            logger.warning(
                "password_record_length_mismatch stored=%s derived=%s",
                len(record.key),
                len(derived),
            )
            return False
        return hmac.compare_digest(derived, record.key)

    def _derive(self, *, password: str, salt_hex: str) -> bytes:
        return hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt_hex.encode("ascii"),
            n=self._n,
            r=self._r,
            p=self._p,
            maxmem=_SCRYPT_MAXMEM,
            dklen=self._key_bytes,
        )
