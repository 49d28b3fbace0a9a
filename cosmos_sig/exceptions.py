"""Cosmos signing exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "SigError",
    "ValidationError",
    "InvalidMnemonicError",
    "CryptoError",
    "DerivationError",
    "SigningError",
    "SerializationError",
    "EncodingError",
]


class SigError(Exception):
    """Base exception for all cosmos_sig errors."""
    
    def __init__(
        self, 
        message: str, 
        code: Optional[int] = None, 
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data
        
    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(SigError):
    """Raised when input validation fails."""
    pass


class InvalidMnemonicError(ValidationError):
    """Raised when a mnemonic has an unknown word, wrong length or bad checksum."""
    pass


class CryptoError(SigError):
    """Raised when cryptographic operation fails."""
    pass


class DerivationError(CryptoError):
    """Raised when a derivation path cannot produce a private key."""
    pass


class SigningError(CryptoError):
    """Raised when the secp256k1 signer rejects a private key."""
    pass


class SerializationError(SigError):
    """Raised when serialization/deserialization fails."""
    pass


class EncodingError(SerializationError):
    """Raised when a value has no canonical JSON representation."""
    
    def __init__(self, message: str, path: str = "$") -> None:
        super().__init__(f"{message} at {path}", data=path)
        self.path = path
