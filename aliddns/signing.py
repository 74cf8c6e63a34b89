"""Request signing for the AliDNS RPC API.

AliDNS authenticates every call with an HMAC-SHA1 signature over a
canonical rendering of the query parameters. The provider recomputes the
signature on its side, so the encoding here must match its canonicalization
byte for byte or every signed call is rejected.
"""

import base64
import hashlib
import hmac
import secrets
from datetime import datetime, timezone
from urllib.parse import quote

API_VERSION = "2015-01-09"
SIGNATURE_METHOD = "HMAC-SHA1"
SIGNATURE_VERSION = "1.0"

# Percent-encoded "GET&/&": fixed HTTP method and root path
STRING_TO_SIGN_PREFIX = "GET&%2F&"


def percent_encode(value: str) -> str:
    """Percent-encode a string the way AliDNS canonicalizes it.

    Only unreserved characters (letters, digits, ``-_.~``) stay literal.
    Sub-delimiters such as ``!'()*`` are escaped too.
    """
    return quote(value, safe="~")


def canonicalize(params: dict[str, str]) -> str:
    """Build the sorted, percent-encoded query string used as signing input."""
    return "&".join(
        f"{percent_encode(key)}={percent_encode(params[key])}"
        for key in sorted(params)
    )


def string_to_sign(params: dict[str, str]) -> str:
    return STRING_TO_SIGN_PREFIX + percent_encode(canonicalize(params))


def sign(secret: str, params: dict[str, str]) -> str:
    """Compute the base64 HMAC-SHA1 signature of a parameter mapping.

    Args:
        secret: AccessKey secret
        params: All request parameters except ``Signature``

    Returns:
        The base64-encoded digest
    """
    digest = hmac.new(
        f"{secret}&".encode(),
        string_to_sign(params).encode(),
        hashlib.sha1,
    ).digest()
    return base64.b64encode(digest).decode()


def make_nonce() -> str:
    return secrets.token_hex(16)


def make_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def attach_common_params(
    action_params: dict[str, str],
    access_key_id: str,
    access_key_secret: str,
    nonce: str | None = None,
    timestamp: str | None = None,
) -> dict[str, str]:
    """Merge the common request parameters and append the signature.

    A fresh nonce and timestamp are generated unless given, so the result
    must be built once per outgoing request and never reused.

    Args:
        action_params: Action-specific parameters (``Action`` and its arguments)
        access_key_id: AccessKey ID
        access_key_secret: AccessKey secret used as the signing key
        nonce: Override for the generated nonce
        timestamp: Override for the current UTC timestamp

    Returns:
        A new mapping with common parameters, action parameters and ``Signature``
    """
    params = {
        "Format": "JSON",
        "Version": API_VERSION,
        "AccessKeyId": access_key_id,
        "SignatureMethod": SIGNATURE_METHOD,
        "SignatureVersion": SIGNATURE_VERSION,
        "SignatureNonce": nonce or make_nonce(),
        "Timestamp": timestamp or make_timestamp(),
    }
    params.update(action_params)
    params["Signature"] = sign(access_key_secret, params)
    return params
