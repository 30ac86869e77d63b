"""Ensure the fairnum package is importable for local pytest runs."""

import hashlib
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fairnum import FairNumbers  # noqa: E402

CLIENT_SEED = "clientSeed"
SERVER_SEED = "serverSeed"


class ScriptedBackend:
    """Hash backend returning fixed digests keyed by the trailing counter."""

    def __init__(self, digests):
        self.digests = digests
        self.messages = []

    def sha256(self, data):
        return hashlib.sha256(data).digest()

    def hmac_sha256(self, key, message):
        text = message.decode("utf-8")
        self.messages.append(text)
        return self.digests[int(text.rsplit("-", 1)[1])]


def digest_with_prefix(prefix: bytes) -> bytes:
    return prefix + b"\x00" * (32 - len(prefix))


ONES = b"\xff" * 32
ZEROS = b"\x00" * 32
HALF = digest_with_prefix(b"\x80")
THREE_QUARTERS = digest_with_prefix(b"\xc0")


@pytest.fixture
def pf():
    return FairNumbers(CLIENT_SEED, SERVER_SEED)


@pytest.fixture
def scripted():
    def make(digests, nonce=0, index=None):
        return FairNumbers("c", "s", nonce=nonce, index=index, backend=ScriptedBackend(digests))
    return make
