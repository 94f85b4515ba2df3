from __future__ import annotations

import base64
import binascii
import string

__all__ = [
    "PREFIX",
    "TokenURIError",
    "MalformedTokenURIError",
    "strip_prefix",
    "decode_token_uri",
    "encode_token_uri",
]

PREFIX = "data:application/json;base64,"

_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")
_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


# ------------------------
# Errors
# ------------------------
class TokenURIError(ValueError):
    """Base class for token URI errors.

    `code` is a stable machine-readable identifier for the failure.
    """

    code: str = "invalid_token_uri"


class MalformedTokenURIError(TokenURIError):
    code = "malformed_token_uri"


# ------------------------
# Internals
# ------------------------

def _clean_payload(payload: str) -> str:
    """Reduce a payload to canonical base64 the permissive way.

    URL-safe symbols map onto the standard alphabet, everything from the first
    "=" on is ignored, foreign characters are skipped, and a lone trailing
    symbol (fewer than 8 bits) is dropped before re-padding.
    """
    payload = payload.translate(_URLSAFE_TO_STANDARD).split("=", 1)[0]
    cleaned = "".join(ch for ch in payload if ch in _ALPHABET)
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    return cleaned + "=" * (-len(cleaned) % 4)


def _decode_lenient(payload: str) -> str:
    raw = base64.b64decode(_clean_payload(payload))
    return raw.decode("utf-8", errors="replace")


def _decode_strict(payload: str) -> str:
    try:
        raw = base64.b64decode(payload.encode("ascii"), validate=True)
    except (UnicodeEncodeError, binascii.Error) as e:
        raise MalformedTokenURIError(f"Token URI payload is not valid base64: {e}") from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedTokenURIError(f"Token URI payload is not valid UTF-8: {e}") from e


# ------------------------
# Public encode/decode
# ------------------------

def strip_prefix(uri: str) -> str:
    """Remove the first occurrence of PREFIX, wherever it appears."""
    return uri.replace(PREFIX, "", 1)


def decode_token_uri(uri: str, *, strict: bool = False) -> str:
    """Recover the JSON text embedded in a token URI.

    The result is returned as-is; it is not checked to be JSON. In the default
    lenient mode malformed payloads are decoded on a best-effort basis and
    never raise. With `strict=True` a `MalformedTokenURIError` is raised for a
    payload that is not padded standard base64 or does not decode to UTF-8.
    """
    payload = strip_prefix(uri)
    if strict:
        return _decode_strict(payload)
    return _decode_lenient(payload)


def encode_token_uri(json_text: str) -> str:
    """Wrap JSON text as a base64 token URI."""
    encoded = base64.b64encode(json_text.encode("utf-8")).decode("ascii")
    return PREFIX + encoded
