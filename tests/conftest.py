"""Shared fixtures: an RSA test key and canned ``requests`` responses."""
from __future__ import annotations

import base64
import os
from http import HTTPStatus

import pytest
import requests
from cryptography.hazmat.primitives import padding, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.padding import PKCS1v15
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from requests.structures import CaseInsensitiveDict

SDK_ID = "5f3c2b1a-0000-4000-8000-000000000001"


@pytest.fixture(scope="session")
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def pem_string(private_key):
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


def make_response(status_code=200, body=b"", headers=None, reason=None):
    """Build a real ``requests.Response`` as the transport would return it."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.headers = CaseInsensitiveDict(headers or {})
    resp.reason = reason
    resp.encoding = "utf-8"
    resp.url = "https://api.yoti.com/"
    return resp


def status_reason(status_code):
    return HTTPStatus(status_code).phrase


def encrypt_token(private_key, token):
    """Encrypt a Connect token the way the share callback delivers it."""
    cipher = private_key.public_key().encrypt(token.encode("utf-8"), PKCS1v15())
    return base64.urlsafe_b64encode(cipher).decode("ascii").rstrip("=")


def make_receipt(private_key, attributes=(), **overrides):
    """Build a profile receipt whose content decrypts to ``attributes``.

    ``attributes`` is a sequence of ``(name, value_bytes, content_type)``.
    """
    from yoti_client.profile.protobuf import AttributeList, EncryptedData

    attribute_list = AttributeList()
    for name, value, content_type in attributes:
        attribute_list.attributes.add(name=name, value=value, content_type=content_type)

    key = os.urandom(32)
    iv = os.urandom(16)
    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    plain = padder.update(attribute_list.SerializeToString()) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    encrypted = EncryptedData(iv=iv, cipher_text=encryptor.update(plain) + encryptor.finalize())

    receipt = {
        "receipt_id": "receipt-id",
        "remember_me_id": "remember-me",
        "parent_remember_me_id": "parent-remember-me",
        "timestamp": "2024-03-01T10:15:30Z",
        "sharing_outcome": "SUCCESS",
        "wrapped_receipt_key": base64.b64encode(
            private_key.public_key().encrypt(key, PKCS1v15())
        ).decode("ascii"),
        "other_party_profile_content": base64.b64encode(encrypted.SerializeToString()).decode("ascii"),
    }
    receipt.update(overrides)
    return receipt
