"""Wallet, signing and broadcast operations."""

from ..modules.wallet import (
    create_master_key_from_mnemonic,
    create_wallet_from_mnemonic,
    create_wallet_from_master_key,
    create_key_pair_from_master_key,
    create_address,
    decode_address,
)
from ..modules.transaction import (
    sign_tx,
    create_sign_msg,
    create_signature,
    create_signature_bytes,
    sign,
    verify_tx,
    verify_signatures,
    verify_signature,
    verify_signature_bytes,
)
from ..modules.broadcast import create_broadcast_tx

__all__ = [
    # Wallet
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
