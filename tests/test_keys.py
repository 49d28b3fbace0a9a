import pytest

from cosmos_sig.constants import SECP256K1_ORDER
from cosmos_sig.crypto.keys import PrivateKey, PublicKey
from cosmos_sig.crypto.signature import (
    compact_to_der, der_to_compact, encode_der_signature, is_low_s, parse_der_signature,
)
from cosmos_sig.exceptions import CryptoError, ValidationError
from cosmos_sig.types import KeyPair
from cosmos_sig.utils.encoding import sha256

GENERATOR_COMPRESSED = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
ONE = (1).to_bytes(32, "big")


def test_public_key_of_one_is_generator():
    key = PrivateKey(ONE)
    assert key.public_key().hex() == GENERATOR_COMPRESSED
    assert len(key.public_key(compressed=False).point) == 65


def test_private_key_hex_input_and_repr():
    key = PrivateKey("0x" + ONE.hex())
    assert key == PrivateKey(ONE)
    assert ONE.hex() not in repr(key)


@pytest.mark.parametrize("bad", [
    b"\x00" * 32,
    SECP256K1_ORDER.to_bytes(32, "big"),
    b"\x01" * 31,
    "zz" * 32,
])
def test_invalid_private_keys(bad):
    with pytest.raises(ValidationError):
        PrivateKey(bad)


def test_public_key_rejects_point_off_curve():
    with pytest.raises(ValidationError):
        PublicKey(b"\x02" + b"\xff" * 32)
    with pytest.raises(ValidationError):
        PublicKey(b"\x05" + b"\x11" * 32)


def test_sign_is_deterministic_and_low_s():
    key = PrivateKey(sha256(b"seed"))
    digest = sha256(b"message")
    sig1 = key.sign(digest)
    sig2 = key.sign(digest)
    assert sig1 == sig2
    assert len(sig1) == 64
    assert is_low_s(sig1)
    assert key.public_key().verify(sig1, digest)


def test_verify_rejects_wrong_key_and_digest():
    key = PrivateKey(sha256(b"seed"))
    digest = sha256(b"message")
    sig = key.sign(digest)
    assert not PrivateKey(ONE).public_key().verify(sig, digest)
    assert not key.public_key().verify(sig, sha256(b"other"))
    assert not key.public_key().verify(sig[:63], digest)
    assert not key.public_key().verify(sig, digest[:31])


def test_verify_rejects_high_s():
    key = PrivateKey(sha256(b"seed"))
    digest = sha256(b"message")
    sig = key.sign(digest)
    s = int.from_bytes(sig[32:], "big")
    high = sig[:32] + (SECP256K1_ORDER - s).to_bytes(32, "big")
    assert not is_low_s(high)
    assert not key.public_key().verify(high, digest)


def test_der_compact_roundtrip():
    sig = PrivateKey(ONE).sign(sha256(b"x"))
    der = compact_to_der(sig)
    assert der[0] == 0x30
    assert der_to_compact(der) == sig


def test_der_signature_roundtrip():
    sig = encode_der_signature(1, 2)
    assert parse_der_signature(sig) == (1, 2)
    with pytest.raises(CryptoError):
        parse_der_signature(sig + b"\x00")
    with pytest.raises(CryptoError):
        compact_to_der(b"\x01" * 63)


def test_key_pair_from_private_key():
    pair = KeyPair.from_private_key(ONE)
    assert pair.public_key.hex() == GENERATOR_COMPRESSED
    assert ONE.hex() not in repr(pair)
    assert "private_key" not in repr(pair)
