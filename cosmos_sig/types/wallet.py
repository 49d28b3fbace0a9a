"""Key pair and wallet type definitions."""

from dataclasses import dataclass, field

from ..types.common import Bech32String, PrivateKeyBytes, PublicKeyBytes

__all__ = ["KeyPair", "Wallet"]


@dataclass(frozen=True)
class KeyPair:
    """
    secp256k1 key pair.
    
    The public key is the 33-byte compressed point of the private key.
    """
    private_key: PrivateKeyBytes = field(repr=False)
    public_key: PublicKeyBytes
    
    @classmethod
    def from_private_key(cls, private_key: bytes) -> "KeyPair":
        """
        Build a key pair by computing the compressed public key.
        
        Args:
            private_key: 32-byte private key
            
        Returns:
            KeyPair instance
            
        Raises:
            ValidationError: If the private key is out of range
        """
        from ..crypto.keys import PrivateKey
        
        key = PrivateKey(private_key)
        return cls(
            private_key=key.secret,
            public_key=key.public_key().point,
        )


@dataclass(frozen=True)
class Wallet(KeyPair):
    """Key pair together with its bech32 address."""
    address: Bech32String
