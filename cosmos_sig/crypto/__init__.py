"""Cryptographic primitives for Cosmos signing."""

from ..crypto.keys import PrivateKey, PublicKey
from ..crypto.hd import HDNode
from ..crypto.bip39 import is_valid_mnemonic, validate_mnemonic, mnemonic_to_seed
from ..crypto.signature import (
    parse_der_signature,
    encode_der_signature,
    der_to_compact,
    compact_to_der,
    is_low_s,
)

__all__ = [
    # Keys
    "PrivateKey",
    "PublicKey",
    "HDNode",
    
    # Mnemonics
    "is_valid_mnemonic",
    "validate_mnemonic",
    "mnemonic_to_seed",
    
    # Signatures
    "parse_der_signature",
    "encode_der_signature",
    "der_to_compact",
    "compact_to_der",
    "is_low_s",
]
