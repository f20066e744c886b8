"""Cryptographic functions over byte containers."""

from __future__ import annotations

import hashlib
from typing import Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from .bytes import Bytes, BytesLike
from .bytesn import BytesN
from .errors import HostError

PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64
DIGEST_SIZE = 32

Data = Union[Bytes, BytesN, BytesLike]


def _raw(data: Data) -> bytes:
    if isinstance(data, (Bytes, BytesN)):
        return data.to_bytes()
    if isinstance(data, int):
        raise TypeError("expected a sequence of bytes, not an integer")
    return bytes(data)


def sha256(data: Data) -> BytesN:
    """Return the SHA-256 hash of the data as a 32-byte BytesN."""
    return BytesN(DIGEST_SIZE, hashlib.sha256(_raw(data)).digest())


def ed25519_verify(public_key: Data, message: Data, signature: Data) -> None:
    """Verify an ed25519 signature of ``message`` by ``public_key``.

    Raises ConversionError if the key or signature has the wrong size and
    HostError if the signature does not verify.
    """
    key = BytesN.from_bytes(PUBLIC_KEY_SIZE, _raw(public_key))
    sig = BytesN.from_bytes(SIGNATURE_SIZE, _raw(signature))
    try:
        verifier = Ed25519PublicKey.from_public_bytes(key.to_bytes())
        verifier.verify(sig.to_bytes(), _raw(message))
    except (InvalidSignature, ValueError) as exc:
        raise HostError("Crypto", "InvalidInput") from exc