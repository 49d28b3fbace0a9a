import pytest

from cosmos_sig import SignMeta, create_wallet_from_mnemonic

ABANDON_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)
SPECIAL_MNEMONIC = "special sign fit simple patrol salute grocery chicken wheat radar tonight ceiling"


@pytest.fixture(scope="session")
def wallet():
    return create_wallet_from_mnemonic(ABANDON_MNEMONIC)


@pytest.fixture(scope="session")
def other_wallet():
    return create_wallet_from_mnemonic(SPECIAL_MNEMONIC)


@pytest.fixture
def meta():
    return SignMeta(chain_id="test-chain", account_number="0", sequence="0")


@pytest.fixture
def tx():
    return {
        "msg": [
            {
                "type": "cosmos-sdk/MsgSend",
                "value": {
                    "from_address": "cosmos19rl4cm2hmr8afy4kldpxz3fka4jguq0auqdal4",
                    "to_address": "cosmos1jhg0e7s6gn44tfc5k37kr04sznyhedtc9rzys5",
                    "amount": [{"denom": "uatom", "amount": "1000"}],
                },
            }
        ],
        "fee": {"amount": [{"denom": "uatom", "amount": "500"}], "gas": "200000"},
        "memo": "coffee",
    }
