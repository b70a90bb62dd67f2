"""Cryptographic utilities for the Yoti client.

Handles PEM key loading, request digest signing, token decryption and the
AES unwrapping of profile receipts. Uses the ``cryptography`` package for all
primitives.
"""
from __future__ import annotations

import base64
from pathlib import Path

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, padding, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.padding import PKCS1v15
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import CredentialError


def load_private_key(pem: str | bytes) -> rsa.RSAPrivateKey:
    """Load an RSA private key from PEM text.

    Raises:
        CredentialError: If the key material is malformed or not RSA.
    """
    if isinstance(pem, str):
        pem = pem.encode("utf-8")
    if not isinstance(pem, bytes) or not pem.strip():
        raise CredentialError("PEM key must be a non-empty string")

    try:
        key = serialization.load_pem_private_key(pem, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise CredentialError(f"Invalid PEM key: {exc}") from exc

    if not isinstance(key, rsa.RSAPrivateKey):
        raise CredentialError("PEM key must be an RSA private key")
    return key


def read_pem_file(path: str | Path) -> str:
    """Read PEM text from a file, raising CredentialError if unreadable."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CredentialError(f"Unable to read PEM file {path}: {exc}") from exc


def build_digest_message(method: str, endpoint: str, payload_b64: str | None = None) -> bytes:
    """Build the message covered by the auth digest.

    ``endpoint`` is the path plus query string. The base64 payload is only
    appended when a body is sent.
    """
    message = f"{method.upper()}&{endpoint}"
    if payload_b64:
        message = f"{message}&{payload_b64}"
    return message.encode("utf-8")


def sign_message(message: bytes, private_key: rsa.RSAPrivateKey) -> str:
    """Sign a message with RSA-SHA256 (PKCS#1 v1.5) and return base64."""
    signature = private_key.sign(message, PKCS1v15(), hashes.SHA256())
    return base64.b64encode(signature).decode("ascii")


def verify_signature(message: bytes, signature_b64: str, private_key: rsa.RSAPrivateKey) -> bool:
    """Verify a digest produced by :func:`sign_message` with the matching key."""
    try:
        signature = base64.b64decode(signature_b64)
        private_key.public_key().verify(signature, message, PKCS1v15(), hashes.SHA256())
        return True
    except (ValueError, InvalidSignature):
        return False


def get_auth_key(private_key: rsa.RSAPrivateKey) -> str:
    """Base64 DER encoding of the public half, sent as ``X-Yoti-Auth-Key``."""
    der = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return base64.b64encode(der).decode("ascii")


def decrypt_token(encrypted_token: str, private_key: rsa.RSAPrivateKey) -> str:
    """Decrypt a one-time-use Connect token (urlsafe base64, RSA PKCS#1 v1.5)."""
    try:
        padded = encrypted_token + "=" * (-len(encrypted_token) % 4)
        cipher_bytes = base64.urlsafe_b64decode(padded)
        return private_key.decrypt(cipher_bytes, PKCS1v15()).decode("utf-8")
    except ValueError as exc:
        raise CredentialError(f"Could not decrypt token: {exc}") from exc


def unwrap_receipt_key(wrapped_key_b64: str, private_key: rsa.RSAPrivateKey) -> bytes:
    """Decrypt the receipt's wrapped AES key."""
    try:
        return private_key.decrypt(base64.b64decode(wrapped_key_b64), PKCS1v15())
    except ValueError as exc:
        raise CredentialError(f"Could not unwrap receipt key: {exc}") from exc


def decrypt_aes_cbc(cipher_text: bytes, iv: bytes, key: bytes) -> bytes:
    """AES-CBC decrypt and strip PKCS#7 padding."""
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(cipher_text) + decryptor.finalize()
    unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
    return unpadder.update(padded) + unpadder.finalize()
