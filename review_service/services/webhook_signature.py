"""
Sanity webhook signatures.

The header looks like ``t=1633519811129,v1=<signature>`` where the signature
is the unpadded base64url HMAC-SHA256 of ``"<t>.<raw body>"``.
"""

import base64
import hashlib
import hmac
import re

from review_service.errors import AuthenticationError

SIGNATURE_HEADER_NAME = "sanity-webhook-signature"

SIGNATURE_HEADER_PATTERN = re.compile(r"^t=(?P<timestamp>\d+)[, ]+v1=(?P<signature>[^, ]+)$")


def encode_signature(payload, secret, timestamp):
    message = f"{timestamp}.{payload}".encode("utf-8")
    digest = hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")


def encode_signature_header(payload, secret, timestamp):
    return f"t={timestamp},v1={encode_signature(payload, secret, timestamp)}"


def assert_valid_signature(payload, signature_header, secret):
    if not isinstance(signature_header, str):
        raise AuthenticationError("Missing signature header")

    match = SIGNATURE_HEADER_PATTERN.match(signature_header.strip())
    if not match:
        raise AuthenticationError("Malformed signature header")

    expected = encode_signature(payload, secret, match.group("timestamp"))
    if not hmac.compare_digest(expected, match.group("signature")):
        raise AuthenticationError("Signature mismatch")


def is_valid_signature(payload, signature_header, secret):
    try:
        assert_valid_signature(payload, signature_header, secret)
    except AuthenticationError:
        return False
    return True
