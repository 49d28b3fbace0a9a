"""Constants for Cosmos key derivation and transaction signing."""

__all__ = [
    "COSMOS_PREFIX",
    "COSMOS_COIN_TYPE",
    "COSMOS_PATH",
    "PUBKEY_TYPE_SECP256K1",
    "BROADCAST_MODE_SYNC",
    "BROADCAST_MODE_ASYNC",
    "BROADCAST_MODE_BLOCK",
    "BROADCAST_MODES",
    "HARDENED_OFFSET",
    "BIP32_SEED_KEY",
    "XPRV_VERSION",
    "XPUB_VERSION",
    "SECP256K1_ORDER",
    "cosmos_path",
]

# Address encoding
COSMOS_PREFIX = "cosmos"
"""Bech32 human-readable part for Cosmos Hub addresses."""

# BIP44 derivation
COSMOS_COIN_TYPE = 118
COSMOS_PATH = "m/44'/118'/0'/0/0"
"""Default BIP44 path: account 0, external chain, first address."""

# Amino JSON type tag for secp256k1 public keys
PUBKEY_TYPE_SECP256K1 = "tendermint/PubKeySecp256k1"

# Broadcast modes understood by the Cosmos REST server
BROADCAST_MODE_SYNC = "sync"
"""Return after CheckTx."""

BROADCAST_MODE_ASYNC = "async"
"""Return immediately, without waiting for CheckTx."""

BROADCAST_MODE_BLOCK = "block"
"""Wait for the transaction to be committed in a block."""

BROADCAST_MODES = frozenset({BROADCAST_MODE_SYNC, BROADCAST_MODE_ASYNC, BROADCAST_MODE_BLOCK})

# BIP32
HARDENED_OFFSET = 0x80000000
BIP32_SEED_KEY = b"Bitcoin seed"
XPRV_VERSION = bytes.fromhex("0488ade4")
XPUB_VERSION = bytes.fromhex("0488b21e")

# secp256k1 group order
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def cosmos_path(account: int = 0, change: int = 0, index: int = 0) -> str:
    """Build a BIP44 derivation path for the Cosmos coin type."""
    return f"m/44'/{COSMOS_COIN_TYPE}'/{account}'/{change}/{index}"
