"""secp256k1 key management for Cosmos signing."""

import logging
from typing import Optional, Union

from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey

from ..constants import COSMOS_PREFIX
from ..crypto.signature import compact_to_der, der_to_compact
from ..exceptions import CryptoError, ValidationError
from ..types.common import Bech32String, PrivateKeyBytes, PublicKeyBytes, SignatureBytes
from ..utils.encoding import encode_bech32, hash160, to_words
from ..utils.validation import validate_private_key, validate_public_key

__all__ = ["PrivateKey", "PublicKey"]

logger = logging.getLogger(__name__)


class PrivateKey:
    """
    secp256k1 private key wrapper.

    Handles public key derivation and deterministic (RFC 6979) signing of
    32-byte digests.
    """

    def __init__(self, key: Union[bytes, str, "PrivateKey"]) -> None:
        """
        Initialize private key.

        Args:
            key: Private key as 32 bytes, hex string, or another PrivateKey

        Raises:
            ValidationError: If key format is invalid
        """
        if isinstance(key, PrivateKey):
            self._secret = key._secret
            self._key = key._key
            return

        self._secret = PrivateKeyBytes(validate_private_key(key))

        try:
            self._key = SecpPrivateKey(self._secret)
        except ValueError as e:
            raise ValidationError(f"Invalid private key: {e}") from e

    @property
    def secret(self) -> PrivateKeyBytes:
        """Get private key as bytes."""
        return self._secret

    def hex(self) -> str:
        """Get private key as hex string."""
        return self._secret.hex()

    def public_key(self, compressed: bool = True) -> "PublicKey":
        """
        Get corresponding public key.

        Args:
            compressed: Return compressed format

        Returns:
            PublicKey instance
        """
        serialized = self._key.public_key.format(compressed=compressed)
        return PublicKey(serialized, compressed=compressed)

    def sign(self, message_hash: bytes) -> SignatureBytes:
        """
        Sign 32-byte message hash.

        The nonce is derived with RFC 6979, so the same key and hash always
        give the same signature. s is normalised to the lower half of the
        curve order.

        Args:
            message_hash: 32-byte hash to sign

        Returns:
            64-byte compact signature (r || s)

        Raises:
            CryptoError: If signing fails
        """
        if len(message_hash) != 32:
            raise ValueError("Message hash must be 32 bytes")

        try:
            der = self._key.sign(message_hash, hasher=None)
        except Exception as e:
            raise CryptoError(f"Signing failed: {e}") from e

        return der_to_compact(der)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PrivateKey):
            return False
        return self._secret == other._secret

    def __repr__(self) -> str:
        """String representation."""
        # Show first and last 4 chars of hex for security
        hex_str = self.hex()
        masked = f"{hex_str[:4]}...{hex_str[-4:]}"
        return f"PrivateKey({masked})"


class PublicKey:
    """
    secp256k1 public key wrapper.

    Handles address generation and signature verification.
    """

    def __init__(
        self,
        key: Union[bytes, str, "PublicKey"],
        compressed: Optional[bool] = None
    ) -> None:
        """
        Initialize public key.

        Args:
            key: Public key as bytes, hex string, or another PublicKey
            compressed: Whether key is compressed (auto-detected if None)

        Raises:
            ValidationError: If key format is invalid or not on the curve
        """
        if isinstance(key, PublicKey):
            self._key = key._key
            self._compressed = key._compressed if compressed is None else compressed
            return

        key_bytes = validate_public_key(key)

        if compressed is None:
            self._compressed = len(key_bytes) == 33
        else:
            self._compressed = compressed

        try:
            self._key = SecpPublicKey(key_bytes)
        except ValueError as e:
            raise ValidationError(f"Public key is not a valid curve point: {e}") from e

    @property
    def point(self) -> PublicKeyBytes:
        """Get public key as bytes."""
        return PublicKeyBytes(self._key.format(compressed=self._compressed))

    @property
    def compressed(self) -> bool:
        return self._compressed

    def hex(self) -> str:
        """Get public key as hex string."""
        return self.point.hex()

    def hash160(self) -> bytes:
        """Get RIPEMD160(SHA256(compressed point))."""
        return hash160(self._key.format(compressed=True))

    def address(self, prefix: str = COSMOS_PREFIX) -> Bech32String:
        """
        Get bech32 account address.

        Args:
            prefix: Bech32 human-readable part

        Returns:
            Bech32 address
        """
        return encode_bech32(prefix, to_words(hash160(self.point)))

    def add(self, tweak: bytes) -> "PublicKey":
        """
        Return the point self + tweak * G.

        Raises:
            CryptoError: If the tweak is out of range or the result is infinity
        """
        try:
            tweaked = self._key.add(tweak)
        except ValueError as e:
            raise CryptoError(f"Public key tweak failed: {e}") from e
        return PublicKey(tweaked.format(compressed=True), compressed=self._compressed)

    def verify(self, signature: bytes, message_hash: bytes) -> bool:
        """
        Verify signature.

        Args:
            signature: 64-byte compact signature (r || s)
            message_hash: 32-byte message hash

        Returns:
            True if signature is valid
        """
        if len(message_hash) != 32:
            return False

        try:
            der = compact_to_der(signature)
            return self._key.verify(der, message_hash, hasher=None)
        except (CryptoError, ValueError) as e:
            logger.debug(f"Rejected malformed signature: {e}")
            return False

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PublicKey):
            return False
        return self.point == other.point

    def __repr__(self) -> str:
        """String representation."""
        return f"PublicKey({self.address()})"
