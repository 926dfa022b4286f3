"""Per-turn counters and carry for a recognition session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TurnState:
    # Raw audio bytes fed this turn; becomes the trailer's "len".
    raw_bytes: int = 0
    # Chunk payload bytes written this turn (preamble excluded).
    written_bytes: int = 0
    carry: bytes = b""
    first_chunk: bool = True
    result: str | None = None

    def reset(self) -> None:
        self.raw_bytes = 0
        self.written_bytes = 0
        self.carry = b""
        self.first_chunk = True
        self.result = None


__all__ = ["TurnState"]
