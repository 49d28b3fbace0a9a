"""Signature encoding utilities."""

from typing import Tuple

from ..constants import SECP256K1_ORDER
from ..exceptions import CryptoError
from ..types.common import SignatureBytes

__all__ = [
    "parse_der_signature",
    "encode_der_signature",
    "der_to_compact",
    "compact_to_der",
    "is_low_s",
]

COMPACT_SIGNATURE_LENGTH = 64


def parse_der_signature(signature: bytes) -> Tuple[int, int]:
    """
    Parse DER-encoded signature.

    Args:
        signature: DER-encoded signature

    Returns:
        Tuple of (r, s)

    Raises:
        CryptoError: If signature format is invalid
    """
    try:
        if signature[0] != 0x30:
            raise ValueError("missing sequence tag")

        length = signature[1]
        if length + 2 != len(signature):
            raise ValueError("incorrect length")

        # Parse r value
        if signature[2] != 0x02:
            raise ValueError("missing r integer tag")

        r_length = signature[3]
        r_bytes = signature[4:4 + r_length]
        r = int.from_bytes(r_bytes, "big")

        # Parse s value
        s_offset = 4 + r_length
        if signature[s_offset] != 0x02:
            raise ValueError("missing s integer tag")

        s_length = signature[s_offset + 1]
        if s_offset + 2 + s_length != len(signature):
            raise ValueError("trailing bytes after s")
        s_bytes = signature[s_offset + 2:]
        s = int.from_bytes(s_bytes, "big")

        return r, s

    except (IndexError, ValueError) as e:
        raise CryptoError(f"Invalid DER signature: {e}") from e


def _encode_der_integer(value: int) -> bytes:
    value_bytes = value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")
    if value_bytes[0] & 0x80:
        value_bytes = b"\x00" + value_bytes
    return b"\x02" + bytes([len(value_bytes)]) + value_bytes


def encode_der_signature(r: int, s: int) -> bytes:
    """
    Encode signature as DER.

    Args:
        r: Signature r value
        s: Signature s value

    Returns:
        DER-encoded signature
    """
    sequence = _encode_der_integer(r) + _encode_der_integer(s)
    return b"\x30" + bytes([len(sequence)]) + sequence


def der_to_compact(signature: bytes) -> SignatureBytes:
    """Convert a DER signature to the 64-byte r || s form used by Cosmos."""
    r, s = parse_der_signature(signature)
    return SignatureBytes(r.to_bytes(32, "big") + s.to_bytes(32, "big"))


def compact_to_der(signature: bytes) -> bytes:
    """
    Convert a 64-byte r || s signature to DER.

    Raises:
        CryptoError: If the signature is not 64 bytes
    """
    if len(signature) != COMPACT_SIGNATURE_LENGTH:
        raise CryptoError(
            f"Compact signature must be {COMPACT_SIGNATURE_LENGTH} bytes, got {len(signature)}"
        )

    r = int.from_bytes(signature[:32], "big")
    s = int.from_bytes(signature[32:], "big")
    return encode_der_signature(r, s)


def is_low_s(signature: bytes) -> bool:
    """Check that s is in the lower half of the curve order."""
    s = int.from_bytes(signature[32:COMPACT_SIGNATURE_LENGTH], "big")
    return 0 < s <= SECP256K1_ORDER // 2
