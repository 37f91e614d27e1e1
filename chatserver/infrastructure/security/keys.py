"""
Ed25519 key pair for token signing.

The pair is loaded once at startup and handed to TokenService by the DI
container. Verification only needs the public half.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from chatserver.domain.exceptions import SigningError

PemData = Union[str, bytes]


@dataclass(frozen=True)
class TokenKeys:
    signing_key: Ed25519PrivateKey
    verifying_key: Ed25519PublicKey

    def private_pem(self) -> bytes:
        return self.signing_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def public_pem(self) -> bytes:
        return self.verifying_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )


def _as_bytes(pem: PemData) -> bytes:
    return pem.encode("utf-8") if isinstance(pem, str) else pem


def load_token_keys(private_pem: PemData, public_pem: Optional[PemData] = None) -> TokenKeys:
    """
    Parse a PEM key pair. If public_pem is omitted it is derived from the
    private key. Raises SigningError for anything that is not Ed25519.
    """
    try:
        signing_key = serialization.load_pem_private_key(
            _as_bytes(private_pem), password=None
        )
        verifying_key = (
            serialization.load_pem_public_key(_as_bytes(public_pem))
            if public_pem
            else signing_key.public_key()
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise SigningError(f"Can not load token keys: {e}") from e

    if not isinstance(signing_key, Ed25519PrivateKey):
        raise SigningError("Signing key must be an Ed25519 private key")
    if not isinstance(verifying_key, Ed25519PublicKey):
        raise SigningError("Verifying key must be an Ed25519 public key")
    return TokenKeys(signing_key=signing_key, verifying_key=verifying_key)


def load_token_keys_from_config(config) -> TokenKeys:
    """Read keys from inline PEM settings, falling back to the PEM file paths."""
    private_pem = config.AUTH_PRIVATE_KEY or _read_pem(config.AUTH_PRIVATE_KEY_PATH)
    public_pem = config.AUTH_PUBLIC_KEY or _read_pem(config.AUTH_PUBLIC_KEY_PATH, required=False)
    return load_token_keys(private_pem, public_pem)


def _read_pem(path: str, required: bool = True) -> Optional[bytes]:
    if path and Path(path).is_file():
        return Path(path).read_bytes()
    if required:
        raise SigningError(f"Key file not found: {path or '<unset>'}")
    return None


def generate_token_keys() -> TokenKeys:
    signing_key = Ed25519PrivateKey.generate()
    return TokenKeys(signing_key=signing_key, verifying_key=signing_key.public_key())
