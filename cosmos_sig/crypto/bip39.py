"""BIP39 mnemonic handling."""

import hashlib
import unicodedata

from mnemonic import Mnemonic

from ..exceptions import InvalidMnemonicError

__all__ = ["is_valid_mnemonic", "validate_mnemonic", "mnemonic_to_seed"]

VALID_WORD_COUNTS = (12, 15, 18, 21, 24)

_english = Mnemonic("english")


def _normalize(text: str) -> str:
    return unicodedata.normalize("NFKD", text)


def is_valid_mnemonic(mnemonic: str) -> bool:
    """Check word count, wordlist membership and checksum."""
    try:
        validate_mnemonic(mnemonic)
        return True
    except InvalidMnemonicError:
        return False


def validate_mnemonic(mnemonic: str) -> str:
    """
    Validate an English BIP39 mnemonic.

    Args:
        mnemonic: Space separated mnemonic words

    Returns:
        The mnemonic with whitespace collapsed and NFKD normalised

    Raises:
        InvalidMnemonicError: If the word count, a word or the checksum is wrong
    """
    if not isinstance(mnemonic, str):
        raise InvalidMnemonicError(f"Mnemonic must be a string, got {type(mnemonic).__name__}")

    words = _normalize(mnemonic).split()
    if len(words) not in VALID_WORD_COUNTS:
        raise InvalidMnemonicError(f"Invalid mnemonic word count: {len(words)}")

    unknown = [word for word in words if word not in _english.wordlist]
    if unknown:
        raise InvalidMnemonicError(f"Unknown mnemonic word: {unknown[0]!r}")

    normalized = " ".join(words)
    if not _english.check(normalized):
        raise InvalidMnemonicError("Invalid mnemonic checksum")

    return normalized


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> bytes:
    """
    Convert mnemonic to a 64-byte seed using PBKDF2.

    Raises:
        InvalidMnemonicError: If the mnemonic is invalid
    """
    mnemonic = validate_mnemonic(mnemonic)
    mnemonic_bytes = mnemonic.encode("utf-8")
    passphrase_bytes = _normalize("mnemonic" + passphrase).encode("utf-8")

    return hashlib.pbkdf2_hmac(
        "sha512",
        mnemonic_bytes,
        passphrase_bytes,
        2048,
        dklen=64
    )
