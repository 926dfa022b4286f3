"""Base64 re-blocking of a raw audio stream into splice-safe chunks.

Base64 encodes 3 input bytes as 4 output characters. Encoding a partial group
emits ``=`` padding, which is only legal at the very end of a base64 string; a
padded block in the middle of the ``speech`` field corrupts the whole stream.
``encode_step`` therefore only ever encodes whole 3-byte groups and hands the
0-2 leftover bytes back to the caller, who passes them in on the next call.
``encode_final`` is the one place padding is allowed.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass

from chunked_asr.errors import CapacityError

GROUP_BYTES = 3
GROUP_CHARS = 4
MAX_CARRY = GROUP_BYTES - 1


@dataclass(frozen=True, slots=True)
class Base64Block:
    chunk: bytes
    carry: bytes


def encoded_size(n: int) -> int:
    """Return the base64 length of ``n`` raw bytes (with padding)."""
    return ((max(0, int(n)) + GROUP_BYTES - 1) // GROUP_BYTES) * GROUP_CHARS


def _check_capacity(required: int, out_capacity: int) -> None:
    if required > out_capacity:
        raise CapacityError(required=required, capacity=int(out_capacity), what="base64 output")


def encode_step(carry_in: bytes, new_bytes: bytes, out_capacity: int) -> Base64Block:
    if len(carry_in) > MAX_CARRY:
        raise ValueError(f"carry must hold at most {MAX_CARRY} bytes, got {len(carry_in)}")

    total = len(carry_in) + len(new_bytes)
    usable = total - (total % GROUP_BYTES)
    _check_capacity(encoded_size(usable), out_capacity)

    if usable == 0:
        return Base64Block(chunk=b"", carry=bytes(carry_in) + bytes(new_bytes))

    staged = bytes(carry_in) + bytes(new_bytes)
    return Base64Block(chunk=base64.b64encode(staged[:usable]), carry=staged[usable:])


def encode_final(carry: bytes, out_capacity: int) -> bytes:
    """Encode the last 0-2 bytes of a stream, padded."""
    if len(carry) > MAX_CARRY:
        raise ValueError(f"carry must hold at most {MAX_CARRY} bytes, got {len(carry)}")
    if not carry:
        return b""
    _check_capacity(encoded_size(len(carry)), out_capacity)
    return base64.b64encode(bytes(carry))


__all__ = ["Base64Block", "GROUP_BYTES", "MAX_CARRY", "encode_final", "encode_step", "encoded_size"]
