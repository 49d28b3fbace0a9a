"""Signing metadata, signature and broadcast type definitions."""

from dataclasses import dataclass
from typing import Any, Mapping, Union

from ..constants import (
    BROADCAST_MODE_ASYNC,
    BROADCAST_MODE_BLOCK,
    BROADCAST_MODE_SYNC,
    PUBKEY_TYPE_SECP256K1,
)
from ..exceptions import ValidationError
from ..types.common import Base64String, JSONObject, StdTx

__all__ = [
    "SignMeta",
    "PubKey",
    "StdSignature",
    "BroadcastMode",
    "BroadcastTx",
]


class BroadcastMode(str):
    """Broadcast modes."""
    SYNC = BROADCAST_MODE_SYNC
    ASYNC = BROADCAST_MODE_ASYNC
    BLOCK = BROADCAST_MODE_BLOCK


@dataclass(frozen=True)
class SignMeta:
    """
    Signing context that is not part of the transaction body.
    
    Must be supplied fresh for every signature so a signature cannot be
    replayed on another chain, account or sequence number.
    """
    chain_id: str
    account_number: str
    sequence: str
    
    @classmethod
    def from_value(cls, value: Union["SignMeta", Mapping[str, Any]]) -> "SignMeta":
        """
        Coerce a SignMeta or a mapping with the same keys.
        
        Raises:
            ValidationError: If a field is missing or is not a string
        """
        if isinstance(value, SignMeta):
            return value
            
        fields = {}
        for name in ("chain_id", "account_number", "sequence"):
            if name not in value:
                raise ValidationError(f"Sign metadata is missing '{name}'")
            if not isinstance(value[name], str):
                raise ValidationError(
                    f"Sign metadata '{name}' must be a string, got {type(value[name]).__name__}"
                )
            fields[name] = value[name]
            
        return cls(**fields)


@dataclass(frozen=True)
class PubKey:
    """Amino-tagged public key."""
    value: Base64String
    type: str = PUBKEY_TYPE_SECP256K1
    
    def to_dict(self) -> JSONObject:
        return {"type": self.type, "value": self.value}


@dataclass(frozen=True)
class StdSignature:
    """Signature with the signer's embedded public key."""
    signature: Base64String
    pub_key: PubKey
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StdSignature":
        """
        Parse the wire JSON shape.
        
        Raises:
            ValidationError: If required fields are missing
        """
        try:
            pub_key = data["pub_key"]
            return cls(
                signature=Base64String(data["signature"]),
                pub_key=PubKey(
                    value=Base64String(pub_key["value"]),
                    type=pub_key.get("type", PUBKEY_TYPE_SECP256K1),
                ),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ValidationError(f"Malformed signature entry: {e}") from e
            
    def to_dict(self) -> JSONObject:
        return {
            "signature": self.signature,
            "pub_key": self.pub_key.to_dict(),
        }


@dataclass(frozen=True)
class BroadcastTx:
    """Signed transaction wrapped for submission."""
    tx: StdTx
    mode: str = BroadcastMode.SYNC
    
    def to_dict(self) -> JSONObject:
        return {"tx": dict(self.tx), "mode": self.mode}
