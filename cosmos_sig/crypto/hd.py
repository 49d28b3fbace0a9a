"""Hierarchical Deterministic key derivation (BIP32)."""

import hmac
import hashlib
from typing import Optional

from ..constants import (
    BIP32_SEED_KEY,
    HARDENED_OFFSET,
    SECP256K1_ORDER as N,
    XPRV_VERSION,
    XPUB_VERSION,
)
from ..crypto.keys import PrivateKey, PublicKey
from ..exceptions import CryptoError, DerivationError, ValidationError
from ..utils.encoding import decode_base58_check, encode_base58_check, hash160
from ..utils.validation import parse_derivation_path

__all__ = ["HDNode"]

MASTER_FINGERPRINT = b"\x00\x00\x00\x00"
SERIALIZED_LENGTH = 78


class HDNode:
    """
    HD wallet node (BIP32).

    A node holding a private key can derive hardened and normal children.
    A neutered node (public key only) can derive normal children, and the
    children it produces carry no private key.
    """

    def __init__(
        self,
        private_key: Optional[bytes],
        public_key: bytes,
        chain_code: bytes,
        depth: int = 0,
        parent_fingerprint: bytes = MASTER_FINGERPRINT,
        index: int = 0,
    ):
        self.private_key = private_key
        self.public_key = public_key
        self.chain_code = chain_code
        self.depth = depth
        self.parent_fingerprint = parent_fingerprint
        self.index = index

    @classmethod
    def from_seed(cls, seed: bytes) -> "HDNode":
        """Create master node from seed."""
        if len(seed) < 16 or len(seed) > 64:
            raise ValueError("Seed must be between 16 and 64 bytes")

        h = hmac.new(BIP32_SEED_KEY, seed, hashlib.sha512).digest()

        private_key_bytes = h[:32]
        chain_code = h[32:]

        key_int = int.from_bytes(private_key_bytes, "big")
        if key_int == 0 or key_int >= N:
            raise CryptoError("Invalid master key")

        public_key = PrivateKey(private_key_bytes).public_key(compressed=True).point

        return cls(
            private_key=private_key_bytes,
            public_key=public_key,
            chain_code=chain_code,
        )

    @classmethod
    def from_base58(cls, xkey: str) -> "HDNode":
        """
        Load a node from an xprv or xpub string.

        Raises:
            ValidationError: If the string is not a valid extended key
        """
        data = decode_base58_check(xkey)
        if len(data) != SERIALIZED_LENGTH:
            raise ValidationError(f"Extended key must be {SERIALIZED_LENGTH} bytes, got {len(data)}")

        version = data[0:4]
        depth = data[4]
        parent_fingerprint = data[5:9]
        index = int.from_bytes(data[9:13], "big")
        chain_code = data[13:45]
        key_data = data[45:78]

        if depth == 0 and (parent_fingerprint != MASTER_FINGERPRINT or index != 0):
            raise ValidationError("Master key with non-zero parent fingerprint or index")

        if version == XPRV_VERSION:
            if key_data[0] != 0x00:
                raise ValidationError("Extended private key must start with 0x00")
            private_key = key_data[1:]
            public_key = PrivateKey(private_key).public_key(compressed=True).point
        elif version == XPUB_VERSION:
            private_key = None
            public_key = PublicKey(key_data).point
        else:
            raise ValidationError(f"Unknown extended key version: {version.hex()}")

        return cls(
            private_key=private_key,
            public_key=public_key,
            chain_code=chain_code,
            depth=depth,
            parent_fingerprint=parent_fingerprint,
            index=index,
        )

    @property
    def is_neutered(self) -> bool:
        """True if this node holds no private key."""
        return self.private_key is None

    @property
    def identifier(self) -> bytes:
        return hash160(self.public_key)

    @property
    def fingerprint(self) -> bytes:
        return self.identifier[:4]

    def neuter(self) -> "HDNode":
        """Return a public-only copy of this node."""
        return HDNode(
            private_key=None,
            public_key=self.public_key,
            chain_code=self.chain_code,
            depth=self.depth,
            parent_fingerprint=self.parent_fingerprint,
            index=self.index,
        )

    def to_base58(self) -> str:
        """Serialize as xprv (private nodes) or xpub (neutered nodes)."""
        if self.private_key is not None:
            version = XPRV_VERSION
            key_data = b"\x00" + self.private_key
        else:
            version = XPUB_VERSION
            key_data = self.public_key

        data = (
            version
            + bytes([self.depth])
            + self.parent_fingerprint
            + self.index.to_bytes(4, "big")
            + self.chain_code
            + key_data
        )
        return encode_base58_check(data)

    def derive(self, index: int) -> "HDNode":
        """
        Derive child node.

        Raises:
            DerivationError: If a hardened child is requested from a neutered node
        """
        if index >= HARDENED_OFFSET:
            if self.private_key is None:
                raise DerivationError("Cannot do hardened derivation without private key")
            data = b"\x00" + self.private_key + index.to_bytes(4, "big")
        else:
            data = self.public_key + index.to_bytes(4, "big")

        h = hmac.new(self.chain_code, data, hashlib.sha512).digest()

        tweak = h[:32]
        child_chain_code = h[32:]

        # BIP32: skip to the next index when IL is out of range
        if int.from_bytes(tweak, "big") >= N:
            return self.derive(index + 1)

        if self.private_key is not None:
            child_key_int = int.from_bytes(tweak, "big")
            parent_key_int = int.from_bytes(self.private_key, "big")
            child_private_int = (parent_key_int + child_key_int) % N

            if child_private_int == 0:
                return self.derive(index + 1)

            child_private_key = child_private_int.to_bytes(32, "big")
            child_public_key = PrivateKey(child_private_key).public_key(compressed=True).point
        else:
            child_private_key = None
            try:
                child_public_key = PublicKey(self.public_key).add(tweak).point
            except CryptoError:
                return self.derive(index + 1)

        return HDNode(
            private_key=child_private_key,
            public_key=child_public_key,
            chain_code=child_chain_code,
            depth=self.depth + 1,
            parent_fingerprint=self.fingerprint,
            index=index,
        )

    def derive_path(self, path: str) -> "HDNode":
        """
        Derive using BIP32 path like m/44'/118'/0'/0/0.

        Raises:
            DerivationError: If the path is malformed, is absolute but this
                node is not a master node, or needs a private key this node
                does not have
        """
        indices = parse_derivation_path(path)

        if path.startswith("m") and self.parent_fingerprint != MASTER_FINGERPRINT:
            raise DerivationError("Expected master node for absolute path, got child")

        node = self
        for index in indices:
            node = node.derive(index)

        return node

    def __repr__(self) -> str:
        kind = "public" if self.is_neutered else "private"
        return f"HDNode({kind}, depth={self.depth}, index={self.index})"
