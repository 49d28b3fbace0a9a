import pytest

from cosmos_sig.exceptions import DerivationError
from cosmos_sig.utils import validation as v
from cosmos_sig.utils.encoding import encode_bech32, to_words


def test_private_key_validation():
    assert v.is_valid_private_key("01" * 32)
    assert not v.is_valid_private_key("00" * 32)
    assert not v.is_valid_private_key(b"\x01" * 33)
    assert not v.is_valid_private_key(None)


def test_public_key_validation():
    assert v.is_valid_public_key("02" + "11" * 32)
    assert v.is_valid_public_key(b"\x04" + b"\x11" * 64)
    assert not v.is_valid_public_key(b"\x04" + b"\x11" * 32)
    assert not v.is_valid_public_key("xyz")
    assert not v.is_valid_public_key("02" + "11" * 32 + "\n")


def test_parse_derivation_path():
    assert v.parse_derivation_path("m") == []
    assert v.parse_derivation_path("m/44'/118'/0'/0/0") == [
        0x8000002C, 0x80000076, 0x80000000, 0, 0,
    ]
    assert v.parse_derivation_path("0h/1") == [0x80000000, 1]
    assert v.is_valid_derivation_path("m/0/1")
    assert not v.is_valid_derivation_path("m/-1")
    assert not v.is_valid_derivation_path("m/44'/118'/0'/0/0\n")
    assert not v.is_valid_derivation_path("m/٤٤'")
    with pytest.raises(DerivationError):
        v.parse_derivation_path(None)


def test_address_validation():
    address = encode_bech32("cosmos", to_words(b"\x11" * 20))
    assert v.is_valid_address(address)
    assert v.is_valid_address(address, "cosmos")
    assert not v.is_valid_address(address, "osmo")
    assert not v.is_valid_address("")
    assert not v.is_valid_address("a12uel5l")
