from cosmos_sig import (
    BROADCAST_MODE_ASYNC,
    BROADCAST_MODE_BLOCK,
    BroadcastMode,
    BroadcastTx,
    create_broadcast_tx,
    sign_tx,
)


def test_default_mode_is_sync(tx, meta, wallet):
    signed = sign_tx(tx, meta, wallet)
    envelope = create_broadcast_tx(signed)
    assert isinstance(envelope, BroadcastTx)
    assert envelope.mode == BroadcastMode.SYNC == "sync"
    assert envelope.tx is signed


def test_known_modes():
    assert create_broadcast_tx({}, BROADCAST_MODE_ASYNC).mode == "async"
    assert create_broadcast_tx({}, BROADCAST_MODE_BLOCK).mode == "block"


def test_unknown_mode_passes_through():
    assert create_broadcast_tx({}, "commit").mode == "commit"


def test_to_dict(tx, meta, wallet):
    signed = sign_tx(tx, meta, wallet)
    assert create_broadcast_tx(signed, "block").to_dict() == {"tx": signed, "mode": "block"}
