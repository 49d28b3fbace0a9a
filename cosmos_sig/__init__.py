"""
Cosmos Signing Python Library

Deterministic key derivation, bech32 addresses and canonical signing and
verification of Cosmos SDK transactions.
"""

from .constants import (
    COSMOS_PREFIX,
    COSMOS_PATH,
    PUBKEY_TYPE_SECP256K1,
    BROADCAST_MODE_SYNC,
    BROADCAST_MODE_ASYNC,
    BROADCAST_MODE_BLOCK,
    cosmos_path,
)
from .exceptions import (
    SigError,
    ValidationError,
    InvalidMnemonicError,
    CryptoError,
    DerivationError,
    SigningError,
    SerializationError,
    EncodingError,
)
from .crypto import HDNode, PrivateKey, PublicKey
from .types import (
    KeyPair,
    Wallet,
    SignMeta,
    StdSignature,
    BroadcastTx,
    BroadcastMode,
)
from .utils.canonical import to_canonical_json, to_canonical_json_bytes
from .modules import (
    create_master_key_from_mnemonic,
    create_wallet_from_mnemonic,
    create_wallet_from_master_key,
    create_key_pair_from_master_key,
    create_address,
    decode_address,
    sign_tx,
    create_sign_msg,
    create_signature,
    create_signature_bytes,
    sign,
    verify_tx,
    verify_signatures,
    verify_signature,
    verify_signature_bytes,
    create_broadcast_tx,
)

__version__ = "0.6.0"

__all__ = [
    # Constants
    "COSMOS_PREFIX",
    "COSMOS_PATH",
    "PUBKEY_TYPE_SECP256K1",
    "BROADCAST_MODE_SYNC",
    "BROADCAST_MODE_ASYNC",
    "BROADCAST_MODE_BLOCK",
    "cosmos_path",

    # Exceptions
    "SigError",
    "ValidationError",
    "InvalidMnemonicError",
    "CryptoError",
    "DerivationError",
    "SigningError",
    "SerializationError",
    "EncodingError",

    # Crypto
    "HDNode",
    "PrivateKey",
    "PublicKey",

    # Types
    "KeyPair",
    "Wallet",
    "SignMeta",
    "StdSignature",
    "BroadcastTx",
    "BroadcastMode",

    # Canonical JSON
    "to_canonical_json",
    "to_canonical_json_bytes",

    # Wallets
    "create_master_key_from_mnemonic",
    "create_wallet_from_mnemonic",
    "create_wallet_from_master_key",
    "create_key_pair_from_master_key",
    "create_address",
    "decode_address",

    # Signing
    "sign_tx",
    "create_sign_msg",
    "create_signature",
    "create_signature_bytes",
    "sign",

    # Verification
    "verify_tx",
    "verify_signatures",
    "verify_signature",
    "verify_signature_bytes",

    # Broadcast
    "create_broadcast_tx",
]
