"""Key derivation, address and wallet creation."""

import logging
from typing import Union

from ..constants import COSMOS_PATH, COSMOS_PREFIX
from ..crypto.bip39 import mnemonic_to_seed
from ..crypto.hd import HDNode
from ..crypto.keys import PrivateKey, PublicKey
from ..exceptions import DerivationError, ValidationError
from ..types.common import Bech32String
from ..types.wallet import KeyPair, Wallet
from ..utils.validation import validate_address

__all__ = [
    "create_master_key_from_mnemonic",
    "create_wallet_from_mnemonic",
    "create_wallet_from_master_key",
    "create_key_pair_from_master_key",
    "create_address",
    "decode_address",
]

logger = logging.getLogger(__name__)


def create_master_key_from_mnemonic(mnemonic: str, passphrase: str = "") -> HDNode:
    """
    Derive a BIP32 master key from a mnemonic.

    Args:
        mnemonic: BIP39 mnemonic
        passphrase: Optional BIP39 passphrase

    Returns:
        Master HDNode

    Raises:
        InvalidMnemonicError: If the mnemonic is invalid
    """
    seed = mnemonic_to_seed(mnemonic, passphrase)
    return HDNode.from_seed(seed)


def create_wallet_from_mnemonic(
    mnemonic: str,
    prefix: str = COSMOS_PREFIX,
    path: str = COSMOS_PATH,
    passphrase: str = "",
) -> Wallet:
    """
    Create a wallet from a known mnemonic.

    Args:
        mnemonic: BIP39 mnemonic
        prefix: Bech32 human-readable part
        path: BIP32 derivation path
        passphrase: Optional BIP39 passphrase

    Returns:
        Wallet with address and key pair

    Raises:
        InvalidMnemonicError: If the mnemonic is invalid
        DerivationError: If the path is malformed
    """
    master_key = create_master_key_from_mnemonic(mnemonic, passphrase)
    return create_wallet_from_master_key(master_key, prefix, path)


def create_wallet_from_master_key(
    master_key: Union[HDNode, str],
    prefix: str = COSMOS_PREFIX,
    path: str = COSMOS_PATH,
) -> Wallet:
    """
    Create a wallet from a BIP32 master key.

    Args:
        master_key: Master HDNode or its xprv serialization
        prefix: Bech32 human-readable part
        path: BIP32 derivation path

    Returns:
        Wallet with address and key pair
    """
    key_pair = create_key_pair_from_master_key(master_key, path)
    address = create_address(key_pair.public_key, prefix)

    logger.debug(f"Derived wallet {address} at {path}")

    return Wallet(
        private_key=key_pair.private_key,
        public_key=key_pair.public_key,
        address=address,
    )


def create_key_pair_from_master_key(
    master_key: Union[HDNode, str],
    path: str = COSMOS_PATH,
) -> KeyPair:
    """
    Derive a key pair from a BIP32 master key.

    Args:
        master_key: Master HDNode or its xprv/xpub serialization
        path: BIP32 derivation path

    Returns:
        Derived key pair

    Raises:
        DerivationError: If the path is malformed or yields no private key
    """
    if isinstance(master_key, str):
        try:
            master_key = HDNode.from_base58(master_key)
        except ValidationError as e:
            raise DerivationError(f"Invalid extended key: {e}") from e

    node = master_key.derive_path(path)
    if node.private_key is None:
        raise DerivationError(f"Could not derive private key at {path}")

    private_key = PrivateKey(node.private_key)

    return KeyPair(
        private_key=private_key.secret,
        public_key=private_key.public_key(compressed=True).point,
    )


def create_address(public_key: bytes, prefix: str = COSMOS_PREFIX) -> Bech32String:
    """
    Derive a bech32 address from a public key.

    Args:
        public_key: Compressed public key bytes
        prefix: Bech32 human-readable part

    Returns:
        Bech32 encoded RIPEMD160(SHA256(public_key))

    Raises:
        ValidationError: If the public key is malformed or not on the curve
    """
    return PublicKey(public_key).address(prefix)


def decode_address(address: str, prefix: str = COSMOS_PREFIX) -> bytes:
    """
    Decode a bech32 address back to its 20-byte hash.

    Raises:
        ValidationError: If the address is malformed or has another prefix
    """
    return validate_address(address, prefix)
