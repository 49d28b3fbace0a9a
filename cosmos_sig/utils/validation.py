"""Validation utilities for Cosmos signing."""

import re
from typing import List, Optional, Union

from ..constants import HARDENED_OFFSET, SECP256K1_ORDER
from ..exceptions import DerivationError, ValidationError
from ..utils.encoding import decode_bech32, from_words

__all__ = [
    "is_valid_private_key",
    "validate_private_key",
    "is_valid_public_key",
    "validate_public_key",
    "parse_derivation_path",
    "is_valid_derivation_path",
    "is_valid_address",
    "validate_address",
]

# Regex patterns
HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")
PATH_PATTERN = re.compile(r"m(/[0-9]+['h]?)*|[0-9]+['h]?(/[0-9]+['h]?)*")

ADDRESS_HASH_LENGTH = 20


def _coerce_key_bytes(key: Union[str, bytes], label: str) -> bytes:
    if isinstance(key, str):
        if key.startswith("0x"):
            key = key[2:]
        if not HEX_PATTERN.fullmatch(key):
            raise ValidationError(f"{label} must be hexadecimal")
        try:
            return bytes.fromhex(key)
        except ValueError as e:
            raise ValidationError(f"Invalid hex {label.lower()}: {e}") from e
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise ValidationError(f"{label} must be bytes or hex, got {type(key).__name__}")
    return bytes(key)


def validate_private_key(key: Union[str, bytes]) -> bytes:
    """
    Validate private key and return as bytes.

    Args:
        key: Private key as hex string or bytes

    Returns:
        Private key as 32 bytes

    Raises:
        ValidationError: If private key is invalid
    """
    key = _coerce_key_bytes(key, "Private key")

    if len(key) != 32:
        raise ValidationError(f"Private key must be 32 bytes, got {len(key)}")

    key_int = int.from_bytes(key, "big")
    if key_int == 0:
        raise ValidationError("Private key cannot be zero")
    if key_int >= SECP256K1_ORDER:
        raise ValidationError("Private key exceeds curve order")

    return key


def is_valid_private_key(key: Union[str, bytes]) -> bool:
    """Check if private key is 32 bytes and within the curve order."""
    try:
        validate_private_key(key)
        return True
    except ValidationError:
        return False


def validate_public_key(key: Union[str, bytes]) -> bytes:
    """
    Validate public key and return as bytes.

    Only the prefix byte and length are checked here; whether the point lies
    on the curve is decided by coincurve when the key is loaded.

    Raises:
        ValidationError: If public key is invalid
    """
    key = _coerce_key_bytes(key, "Public key")

    if len(key) == 33:
        if key[0] not in (0x02, 0x03):
            raise ValidationError("Compressed public key must start with 0x02 or 0x03")
    elif len(key) == 65:
        if key[0] != 0x04:
            raise ValidationError("Uncompressed public key must start with 0x04")
    else:
        raise ValidationError(f"Public key must be 33 or 65 bytes, got {len(key)}")

    return key


def is_valid_public_key(key: Union[str, bytes]) -> bool:
    """Check if public key has a valid length and prefix byte."""
    try:
        validate_public_key(key)
        return True
    except ValidationError:
        return False


def parse_derivation_path(path: str) -> List[int]:
    """
    Parse a BIP32 path into child indices.

    Hardened components are marked with ' or h and offset by 2**31.

    Args:
        path: Absolute (m/44'/118'/0'/0/0) or relative (0/1) path

    Returns:
        List of child indices, empty for "m"

    Raises:
        DerivationError: If the path is malformed or an index is out of range
    """
    if not isinstance(path, str) or not PATH_PATTERN.fullmatch(path):
        raise DerivationError(f"Invalid derivation path: {path!r}")

    indices = []
    for component in path.split("/"):
        if component == "m":
            continue

        hardened = component[-1] in ("'", "h")
        index = int(component[:-1] if hardened else component)
        if index >= HARDENED_OFFSET:
            raise DerivationError(f"Path index out of range: {component}")

        indices.append(index + HARDENED_OFFSET if hardened else index)

    return indices


def is_valid_derivation_path(path: str) -> bool:
    """Check if a BIP32 path is well formed."""
    try:
        parse_derivation_path(path)
        return True
    except DerivationError:
        return False


def validate_address(address: str, prefix: Optional[str] = None) -> bytes:
    """
    Validate a bech32 account address.

    Args:
        address: Bech32 address
        prefix: Expected human-readable part, any prefix if None

    Returns:
        The 20-byte address hash

    Raises:
        ValidationError: If the address is malformed or has the wrong prefix
    """
    if not address:
        raise ValidationError("Address cannot be empty")

    hrp, words = decode_bech32(address)
    if prefix is not None and hrp != prefix:
        raise ValidationError(f"Address prefix {hrp!r} does not match {prefix!r}")

    data = from_words(words)
    if len(data) != ADDRESS_HASH_LENGTH:
        raise ValidationError(f"Address must encode {ADDRESS_HASH_LENGTH} bytes, got {len(data)}")

    return data


def is_valid_address(address: str, prefix: Optional[str] = None) -> bool:
    """Check if a bech32 address is valid, optionally for a given prefix."""
    try:
        validate_address(address, prefix)
        return True
    except ValidationError:
        return False
