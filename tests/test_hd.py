import pytest

from cosmos_sig.crypto.hd import HDNode
from cosmos_sig.exceptions import DerivationError, ValidationError

# BIP32 test vector 1
SEED = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
M_XPRV = (
    "xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPPqjiChkVvvNKmPGJxW"
    "Utg6LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi"
)
M_XPUB = (
    "xpub661MyMwAqRbcFtXgS5sYJABqqG9YLmC4Q1Rdap9gSE8NqtwybGhePY2gZ29ESFjqJoCu1"
    "Rupje8YtGqsefD265TMg7usUDFdp6W1EGMcet8"
)
M_0H_XPRV = (
    "xprv9uHRZZhk6KAJC1avXpDAp4MDc3sQKNxDiPvvkX8Br5ngLNv1TxvUxt4cV1rGL5hj6KCes"
    "nDYUhd7oWgT11eZG7XnxHrnYeSvkzY7d2bhkJ7"
)


def test_master_from_seed():
    master = HDNode.from_seed(SEED)
    assert master.to_base58() == M_XPRV
    assert master.neuter().to_base58() == M_XPUB
    assert master.depth == 0


def test_hardened_child():
    master = HDNode.from_seed(SEED)
    child = master.derive_path("m/0'")
    assert child.to_base58() == M_0H_XPRV
    assert child.depth == 1
    assert child.parent_fingerprint == master.fingerprint
    assert master.derive_path("m/0h").to_base58() == M_0H_XPRV


def test_base58_roundtrip():
    assert HDNode.from_base58(M_XPRV).to_base58() == M_XPRV
    public = HDNode.from_base58(M_XPUB)
    assert public.is_neutered
    assert public.to_base58() == M_XPUB


def test_from_base58_rejects_garbage():
    with pytest.raises(ValidationError):
        HDNode.from_base58(M_XPRV[:-1] + "j")


def test_public_derivation_matches_private():
    master = HDNode.from_seed(SEED)
    account = master.derive_path("m/44'/118'/0'")
    private_child = account.derive_path("0/5")
    public_child = account.neuter().derive_path("0/5")
    assert public_child.public_key == private_child.public_key
    assert public_child.chain_code == private_child.chain_code
    assert public_child.private_key is None


def test_hardened_from_public_node_fails():
    public = HDNode.from_seed(SEED).neuter()
    with pytest.raises(DerivationError):
        public.derive_path("m/44'")
    assert public.private_key is None


def test_absolute_path_on_child_fails():
    child = HDNode.from_seed(SEED).derive_path("m/0'")
    with pytest.raises(DerivationError):
        child.derive_path("m/1")
    assert child.derive_path("1").depth == 2


@pytest.mark.parametrize("path", [
    "",
    "m/",
    "m//0",
    "44'/x",
    "m/2147483648",
    "n/0",
    "m/44'/118'/0'\n",
    "m/44'/118'/0'/0/0\n",
    "m/٤٤'",
    "١/0",
])
def test_malformed_paths(path):
    with pytest.raises(DerivationError):
        HDNode.from_seed(SEED).derive_path(path)


def test_master_path_returns_self():
    master = HDNode.from_seed(SEED)
    assert master.derive_path("m") is master
