"""
Text encodings for secrets and shares.

Shares and secrets are raw bytes; these helpers convert them to and from
hex or base64 for transport as text. They never touch field arithmetic.
"""

import base64
import binascii
from enum import Enum

from ..errors import EncodingError


class Encoding(str, Enum):
    """Supported text encodings."""

    HEX = "hex"
    BASE64 = "base64"


def _resolve(encoding: Encoding | str) -> Encoding:
    """Accept an Encoding member or its string value."""
    try:
        return Encoding(encoding)
    except ValueError as e:
        raise EncodingError(f"Unknown encoding: {encoding!r}") from e


def encode_secret(data: bytes, encoding: Encoding) -> str:
    """Encode bytes as lowercase hex or padded standard base64."""
    encoding = _resolve(encoding)
    if encoding is Encoding.HEX:
        return data.hex()
    elif encoding is Encoding.BASE64:
        return base64.b64encode(data).decode("ascii")
    raise EncodingError(f"Unknown encoding: {encoding!r}")


def decode_secret(text: str, encoding: Encoding) -> bytes:
    """
    Decode hex or base64 text.

    Raises:
        EncodingError: If text is not valid for the encoding, or the
            encoding itself is unknown
    """
    encoding = _resolve(encoding)
    try:
        if encoding is Encoding.HEX:
            return bytes.fromhex(text)
        elif encoding is Encoding.BASE64:
            return base64.b64decode(text, validate=True)
    except (ValueError, binascii.Error) as e:
        raise EncodingError(f"Invalid {encoding.value} input: {e}") from e
    raise EncodingError(f"Unknown encoding: {encoding!r}")


def encode_shares(shares: list[bytes], encoding: Encoding) -> list[str]:
    """Encode each share, preserving order."""
    return [encode_secret(share, encoding) for share in shares]


def decode_shares(texts: list[str], encoding: Encoding) -> list[bytes]:
    """
    Decode each share, preserving order.

    Raises:
        EncodingError: On the first entry that fails to decode
    """
    shares = []
    for index, text in enumerate(texts):
        try:
            shares.append(decode_secret(text, encoding))
        except EncodingError as e:
            raise EncodingError(f"Share {index}: {e}") from e
    return shares
