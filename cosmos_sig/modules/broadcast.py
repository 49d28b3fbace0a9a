"""Packaging of signed transactions for broadcast."""

import logging

from ..constants import BROADCAST_MODE_SYNC, BROADCAST_MODES
from ..types.common import StdTx
from ..types.transaction import BroadcastTx

__all__ = ["create_broadcast_tx"]

logger = logging.getLogger(__name__)


def create_broadcast_tx(tx: StdTx, mode: str = BROADCAST_MODE_SYNC) -> BroadcastTx:
    """
    Prepare a signed transaction for broadcast.

    The mode is carried through as given; unknown modes are left for the
    transport to accept or reject.

    Args:
        tx: Signed transaction
        mode: sync, async or block

    Returns:
        Broadcast envelope
    """
    if mode not in BROADCAST_MODES:
        logger.debug(f"Passing through unrecognized broadcast mode {mode!r}")

    return BroadcastTx(tx=tx, mode=mode)
