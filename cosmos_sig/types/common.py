"""Common type definitions for Cosmos signing."""

from typing import Any, Dict, Mapping, NewType, TypeAlias

__all__ = [
    "Bech32String",
    "Base64String",
    "DerivationPath",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "SignatureBytes",
    "JSONObject",
    "Tx",
    "StdTx",
    "StdSignMsg",
]

# Encoded strings
Bech32String = NewType("Bech32String", str)
"""Bech32 address with human-readable prefix."""

Base64String = NewType("Base64String", str)
"""Standard base64 with padding."""

DerivationPath = NewType("DerivationPath", str)
"""BIP32 path such as m/44'/118'/0'/0/0."""

# Crypto types
PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte secp256k1 private key."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""33-byte compressed secp256k1 public key."""

SignatureBytes = NewType("SignatureBytes", bytes)
"""64-byte compact signature (r || s)."""

# JSON-shaped values
JSONObject: TypeAlias = Dict[str, Any]

Tx: TypeAlias = Mapping[str, Any]
"""Unsigned transaction: msg, fee, memo and any sibling fields."""

StdTx: TypeAlias = Mapping[str, Any]
"""Transaction carrying a signatures list."""

StdSignMsg: TypeAlias = Dict[str, Any]
"""account_number, chain_id, fee, memo, msgs, sequence."""

