"""Lifecycle phases of a recognition turn."""

from __future__ import annotations

from enum import Enum


class TurnPhase(str, Enum):
    IDLE = "idle"
    PREAMBLE_SENT = "preamble_sent"
    STREAMING = "streaming"
    TRAILER_SENT = "trailer_sent"
    AWAITING_RESPONSE = "awaiting_response"
    COMPLETED = "completed"
    FAILED = "failed"


# A new turn may only begin once the previous one has settled.
TURN_START_PHASES = frozenset({TurnPhase.IDLE, TurnPhase.COMPLETED, TurnPhase.FAILED})
STREAM_PHASES = frozenset({TurnPhase.PREAMBLE_SENT, TurnPhase.STREAMING})
RESPONSE_PHASES = frozenset({TurnPhase.TRAILER_SENT, TurnPhase.AWAITING_RESPONSE})

__all__ = ["RESPONSE_PHASES", "STREAM_PHASES", "TURN_START_PHASES", "TurnPhase"]
