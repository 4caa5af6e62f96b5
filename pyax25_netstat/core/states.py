# SPDX-License-Identifier: LGPL-3.0-or-later
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR

"""
pyax25_netstat.core.states.py

Display labels for the numeric AX.25 connection state reported by the kernel.

The kernel exposes the link state as a small integer. The report collapses
it onto the netstat-compatible label set below; DISC SENT is part of the set
but no state code maps to it.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class StateLabel(str, Enum):
    """netstat-compatible connection state labels"""
    LISTENING = "LISTENING"
    SABM_SENT = "SABM SENT"
    DISC_SENT = "DISC SENT"
    ESTABLISHED = "ESTABLISHED"
    RECOVERY = "RECOVERY"
    UNKNOWN = "UNKNOWN_STATE"


AX25_STATE_LABELS: Tuple[str, ...] = tuple(label.value for label in StateLabel)

_SETUP_STATES = (1, 2)
_RECOVERY_STATES = (4, 5, 6, 7)


def state_label(state: int) -> str:
    """
    Convert a kernel AX.25 state code to its display label.

    Args:
        state: Raw state code from the connection table

    Returns:
        One of AX25_STATE_LABELS; codes outside 0-7 give UNKNOWN_STATE
    """
    if state == 0:
        return StateLabel.LISTENING.value
    if state == 3:
        return StateLabel.ESTABLISHED.value
    if state in _SETUP_STATES:
        return StateLabel.SABM_SENT.value
    if state in _RECOVERY_STATES:
        return StateLabel.RECOVERY.value
    return StateLabel.UNKNOWN.value
