"""Type definitions for Cosmos signing."""

# Common types
from ..types.common import (
    Bech32String,
    Base64String,
    DerivationPath,
    PrivateKeyBytes,
    PublicKeyBytes,
    SignatureBytes,
    JSONObject,
    Tx,
    StdTx,
    StdSignMsg,
)

# Key types
from ..types.wallet import KeyPair, Wallet

# Transaction types
from ..types.transaction import (
    SignMeta,
    PubKey,
    StdSignature,
    BroadcastMode,
    BroadcastTx,
)

__all__ = [
    # Common
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
    
    # Keys
    "KeyPair",
    "Wallet",
    
    # Transactions
    "SignMeta",
    "PubKey",
    "StdSignature",
    "BroadcastMode",
    "BroadcastTx",
]
