import hashlib
import hmac
import secrets
from typing import Protocol


class HashBackend(Protocol):
    def sha256(self, data: bytes) -> bytes: ...

    def hmac_sha256(self, key: bytes, message: bytes) -> bytes: ...


class HashlibBackend:
    """Default backend on the standard hashlib/hmac primitives."""

    def sha256(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()

    def hmac_sha256(self, key: bytes, message: bytes) -> bytes:
        return hmac.new(key, message, hashlib.sha256).digest()


DEFAULT_BACKEND = HashlibBackend()


def to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return str(value).encode("utf-8")


def generate_random_hex(length: int = 16) -> str:
    # token_hex(n) yields 2n chars; round up then trim odd lengths
    return secrets.token_hex((length + 1) // 2)[:length]
