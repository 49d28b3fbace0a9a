"""Transaction signing and verification."""

import logging
from typing import Any, Mapping, Sequence, Union

from ..constants import PUBKEY_TYPE_SECP256K1
from ..crypto.keys import PrivateKey, PublicKey
from ..exceptions import CryptoError, SigningError, ValidationError
from ..types.common import JSONObject, SignatureBytes, StdSignMsg, StdTx, Tx
from ..types.transaction import PubKey, SignMeta, StdSignature
from ..types.wallet import KeyPair
from ..utils.canonical import to_canonical_json_bytes
from ..utils.encoding import base64_to_bytes, bytes_to_base64, sha256

__all__ = [
    "sign_tx",
    "create_sign_msg",
    "create_signature",
    "create_signature_bytes",
    "sign",
    "verify_tx",
    "verify_signatures",
    "verify_signature",
    "verify_signature_bytes",
]

logger = logging.getLogger(__name__)

SignatureLike = Union[StdSignature, Mapping[str, Any]]


def sign_tx(
    tx: Union[Tx, StdTx],
    meta: Union[SignMeta, Mapping[str, str]],
    key_pair: KeyPair,
) -> JSONObject:
    """
    Sign a transaction.

    Combines the transaction and metadata into a sign message, signs it and
    appends the signature. Existing signatures are kept in order; signing
    again always appends.

    Args:
        tx: Transaction, signed or unsigned
        meta: Chain id, account number and sequence
        key_pair: Signer key pair (a Wallet works too)

    Returns:
        New transaction mapping with the signature appended

    Raises:
        ValidationError: If the transaction or metadata is incomplete
        EncodingError: If the transaction contains non-canonical values
        SigningError: If the private key is invalid
    """
    sign_msg = create_sign_msg(tx, meta)
    signature = create_signature(sign_msg, key_pair)
    signatures = [*(tx.get("signatures") or []), signature]

    logger.debug(
        f"Signed transaction for chain {sign_msg['chain_id']}, "
        f"{len(signatures)} signature(s) attached"
    )

    return {
        **tx,
        "signatures": signatures,
    }


def create_sign_msg(tx: Tx, meta: Union[SignMeta, Mapping[str, str]]) -> StdSignMsg:
    """
    Create the message that gets canonicalized and signed.

    Args:
        tx: Transaction with msg, fee and memo
        meta: Chain id, account number and sequence

    Returns:
        Sign message with exactly the fields account_number, chain_id, fee,
        memo, msgs and sequence

    Raises:
        ValidationError: If a required field is missing
    """
    meta = SignMeta.from_value(meta)

    for name in ("msg", "fee", "memo"):
        if name not in tx:
            raise ValidationError(f"Transaction is missing '{name}'")

    return {
        "account_number": meta.account_number,
        "chain_id": meta.chain_id,
        "fee": tx["fee"],
        "memo": tx["memo"],
        "msgs": tx["msg"],
        "sequence": meta.sequence,
    }


def create_signature(sign_msg: StdSignMsg, key_pair: KeyPair) -> JSONObject:
    """
    Create a signature with the signer's embedded public key.

    Args:
        sign_msg: Sign message
        key_pair: Signer key pair

    Returns:
        Signature in wire JSON shape
    """
    signature_bytes = create_signature_bytes(sign_msg, key_pair.private_key)

    return StdSignature(
        signature=bytes_to_base64(signature_bytes),
        pub_key=PubKey(
            type=PUBKEY_TYPE_SECP256K1,
            value=bytes_to_base64(key_pair.public_key),
        ),
    ).to_dict()


def create_signature_bytes(sign_msg: StdSignMsg, private_key: bytes) -> SignatureBytes:
    """Canonicalize a sign message and sign it."""
    return sign(to_canonical_json_bytes(sign_msg), private_key)


def sign(data: bytes, private_key: bytes) -> SignatureBytes:
    """
    Sign the SHA256 hash of data with a secp256k1 private key.

    Args:
        data: Bytes to hash and sign
        private_key: 32-byte private key

    Returns:
        64-byte compact signature

    Raises:
        SigningError: If the private key is invalid
    """
    try:
        key = PrivateKey(private_key)
    except ValidationError as e:
        raise SigningError(f"Invalid private key: {e.message}") from e

    try:
        return key.sign(sha256(data))
    except CryptoError as e:
        raise SigningError(e.message) from e


def verify_tx(tx: StdTx, meta: Union[SignMeta, Mapping[str, str]]) -> bool:
    """
    Verify a signed transaction's signatures.

    Returns:
        True if there is at least one signature and all are valid
    """
    sign_msg = create_sign_msg(tx, meta)
    return verify_signatures(sign_msg, tx.get("signatures") or [])


def verify_signatures(sign_msg: StdSignMsg, signatures: Sequence[SignatureLike]) -> bool:
    """
    Verify a sign message against multiple signatures.

    No check is made that the embedded public keys belong to any
    particular signer.

    Returns:
        True if there is at least one signature and all are valid
    """
    if not signatures:
        logger.debug("Rejected transaction without signatures")
        return False

    return all(verify_signature(sign_msg, signature) for signature in signatures)


def verify_signature(sign_msg: StdSignMsg, signature: SignatureLike) -> bool:
    """
    Verify a sign message against one signature entry.

    Returns:
        True if the signature is valid for its embedded public key
    """
    if not isinstance(signature, StdSignature):
        signature = StdSignature.from_dict(signature)

    try:
        signature_bytes = base64_to_bytes(signature.signature)
        public_key = base64_to_bytes(signature.pub_key.value)
    except ValidationError as e:
        logger.debug(f"Rejected undecodable signature: {e}")
        return False

    return verify_signature_bytes(sign_msg, signature_bytes, public_key)


def verify_signature_bytes(sign_msg: StdSignMsg, signature: bytes, public_key: bytes) -> bool:
    """
    Verify raw signature bytes against a sign message.

    Args:
        sign_msg: Sign message
        signature: 64-byte compact signature
        public_key: Compressed public key

    Returns:
        True if the signature is valid and matches
    """
    digest = sha256(to_canonical_json_bytes(sign_msg))

    try:
        key = PublicKey(public_key)
    except ValidationError as e:
        logger.debug(f"Rejected signature with invalid public key: {e}")
        return False

    return key.verify(signature, digest)
