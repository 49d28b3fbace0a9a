"""Encoding and hashing utilities for Cosmos signing."""

import base64
import binascii
import hashlib
from typing import List, Sequence, Tuple, Union

from Crypto.Hash import RIPEMD160

from ..exceptions import ValidationError
from ..types.common import Base64String, Bech32String

__all__ = [
    "sha256",
    "ripemd160",
    "hash160",
    "double_sha256",
    "encode_base58",
    "decode_base58",
    "encode_base58_check",
    "decode_base58_check",
    "to_words",
    "from_words",
    "encode_bech32",
    "decode_bech32",
    "bytes_to_base64",
    "base64_to_bytes",
]

# Constants
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
BECH32_MAX_LENGTH = 90


def sha256(data: bytes) -> bytes:
    """Perform SHA256 hash."""
    return hashlib.sha256(data).digest()


def ripemd160(data: bytes) -> bytes:
    """Perform RIPEMD160 hash."""
    return RIPEMD160.new(data).digest()


def hash160(data: bytes) -> bytes:
    """Perform RIPEMD160(SHA256(data))."""
    return ripemd160(sha256(data))


def double_sha256(data: bytes) -> bytes:
    """Perform double SHA256 hash."""
    return sha256(sha256(data))


def encode_base58(data: bytes) -> str:
    """
    Encode bytes as Base58 string.

    Args:
        data: Bytes to encode

    Returns:
        Base58 encoded string
    """
    n = int.from_bytes(data, "big")

    encoded = ""
    while n:
        n, remainder = divmod(n, 58)
        encoded = BASE58_ALPHABET[remainder] + encoded

    # Leading zero bytes map to '1'
    for byte in data:
        if byte == 0:
            encoded = "1" + encoded
        else:
            break

    return encoded


def decode_base58(string: str) -> bytes:
    """
    Decode Base58 string to bytes.

    Raises:
        ValidationError: If string contains invalid characters
    """
    n = 0
    for char in string:
        try:
            n = n * 58 + BASE58_ALPHABET.index(char)
        except ValueError:
            raise ValidationError(f"Invalid Base58 character: {char}")

    body = n.to_bytes((n.bit_length() + 7) // 8, "big") if n else b""
    leading_zeros = len(string) - len(string.lstrip("1"))
    return b"\x00" * leading_zeros + body


def encode_base58_check(data: bytes) -> str:
    """Encode bytes as Base58Check (with 4-byte double SHA256 checksum)."""
    checksum = double_sha256(data)[:4]
    return encode_base58(data + checksum)


def decode_base58_check(string: str) -> bytes:
    """
    Decode Base58Check string.

    Args:
        string: Base58Check string

    Returns:
        Decoded data (without checksum)

    Raises:
        ValidationError: If checksum is invalid
    """
    data = decode_base58(string)
    if len(data) < 4:
        raise ValidationError("Invalid Base58Check string: too short")

    payload, checksum = data[:-4], data[-4:]
    if checksum != double_sha256(payload)[:4]:
        raise ValidationError("Invalid Base58Check checksum")

    return payload


def _bech32_polymod(values: Sequence[int]) -> int:
    """Compute Bech32 checksum polymod."""
    generator = [0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3]
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1ffffff) << 5 ^ value
        for i in range(5):
            chk ^= generator[i] if ((top >> i) & 1) else 0
    return chk


def _bech32_hrp_expand(hrp: str) -> List[int]:
    """Expand human-readable part for Bech32."""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def _convert_bits(data: Sequence[int], from_bits: int, to_bits: int, pad: bool) -> List[int]:
    """Regroup a sequence of from_bits-wide values into to_bits-wide values."""
    value = 0
    bits = 0
    max_value = (1 << to_bits) - 1
    result = []

    for item in data:
        if item < 0 or item >> from_bits:
            raise ValidationError(f"Value {item} does not fit in {from_bits} bits")
        value = (value << from_bits) | item
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((value >> bits) & max_value)

    if pad:
        if bits:
            result.append((value << (to_bits - bits)) & max_value)
    elif bits >= from_bits:
        raise ValidationError("Excess padding")
    elif (value << (to_bits - bits)) & max_value:
        raise ValidationError("Non-zero padding")

    return result


def to_words(data: bytes) -> List[int]:
    """Group bytes into 5-bit words, zero-padding the last word."""
    return _convert_bits(data, 8, 5, pad=True)


def from_words(words: Sequence[int]) -> bytes:
    """
    Convert 5-bit words back to bytes.

    Raises:
        ValidationError: If the padding bits are invalid
    """
    return bytes(_convert_bits(words, 5, 8, pad=False))


def encode_bech32(hrp: str, words: Sequence[int]) -> Bech32String:
    """
    Encode 5-bit words as a Bech32 string.

    Args:
        hrp: Human-readable part
        words: 5-bit values, usually from to_words()

    Returns:
        Bech32 string

    Raises:
        ValidationError: If the result would exceed 90 characters
    """
    if len(hrp) + 7 + len(words) > BECH32_MAX_LENGTH:
        raise ValidationError("Bech32 string exceeds length limit")

    hrp = hrp.lower()
    values = list(words)
    polymod = _bech32_polymod(_bech32_hrp_expand(hrp) + values + [0, 0, 0, 0, 0, 0]) ^ 1
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]

    return Bech32String(hrp + "1" + "".join(BECH32_CHARSET[v] for v in values + checksum))


def decode_bech32(string: str) -> Tuple[str, List[int]]:
    """
    Decode a Bech32 string.

    Args:
        string: Bech32 string

    Returns:
        Tuple of (hrp, words)

    Raises:
        ValidationError: If the string is malformed or the checksum fails
    """
    if len(string) < 8:
        raise ValidationError(f"Invalid Bech32 string: {string!r} too short")
    if len(string) > BECH32_MAX_LENGTH:
        raise ValidationError("Invalid Bech32 string: exceeds length limit")
    if string.lower() != string and string.upper() != string:
        raise ValidationError("Invalid Bech32 string: mixed case")

    string = string.lower()
    pos = string.rfind("1")
    if pos < 1:
        raise ValidationError("Invalid Bech32 string: no separator")
    if pos + 7 > len(string):
        raise ValidationError("Invalid Bech32 string: data too short")

    hrp = string[:pos]
    if any(ord(c) < 33 or ord(c) > 126 for c in hrp):
        raise ValidationError("Invalid Bech32 prefix character")

    values = []
    for char in string[pos + 1:]:
        try:
            values.append(BECH32_CHARSET.index(char))
        except ValueError:
            raise ValidationError(f"Invalid Bech32 character: {char}")

    if _bech32_polymod(_bech32_hrp_expand(hrp) + values) != 1:
        raise ValidationError("Invalid Bech32 checksum")

    return hrp, values[:-6]


def bytes_to_base64(data: bytes) -> Base64String:
    """Encode bytes as standard padded base64."""
    return Base64String(base64.b64encode(data).decode("ascii"))


def base64_to_bytes(string: Union[str, bytes]) -> bytes:
    """
    Decode standard base64.

    Raises:
        ValidationError: If the input is not valid base64
    """
    try:
        return base64.b64decode(string, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise ValidationError(f"Invalid base64 string: {e}") from e
