"""Deterministic commit identity for Gitlet.

A commit id depends on exactly three inputs: the parent id, the commit
timestamp and the message. The inputs are folded into a single integer
with an order-sensitive base-31 polynomial, and the decimal text of that
integer is run through SHA-256.

File contents and the manifest are NOT part of the identity. Two commits
with the same parent, timestamp and message therefore share an id even
when their file changes differ. Timestamp resolution is whatever the host
clock provides (microseconds on most platforms).
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timedelta, timezone

_MULTIPLIER = 31
_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def string_hash(text: str | None) -> int:
    """Return the 32-bit base-31 polynomial hash of *text* (0 for None)."""
    if text is None:
        return 0
    h = 0
    for ch in text:
        h = (_MULTIPLIER * h + ord(ch)) & _MASK_32
    return _to_signed(h, 32)


def timestamp_hash(timestamp: datetime) -> int:
    """Fold a timestamp's microseconds since epoch into 32 bits."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    micros = ((timestamp - _EPOCH) // timedelta(microseconds=1)) & _MASK_64
    return _to_signed(micros ^ (micros >> 32), 32)


def accumulate(parent_id: str | None, timestamp: datetime, message: str) -> int:
    """Combine the identity inputs with 64-bit wraparound arithmetic."""
    acc = 1
    for part in (string_hash(parent_id), timestamp_hash(timestamp), string_hash(message)):
        acc = _to_signed(_MULTIPLIER * acc + part, 64)
    return acc


def compute_commit_id(parent_id: str | None, timestamp: datetime, message: str) -> str:
    """Compute the SHA-256 commit id for the given identity inputs.

    Args:
        parent_id: Id of the parent commit, or None for a root commit.
        timestamp: Commit creation time. Naive values are taken as UTC.
        message: Commit message.

    Returns:
        Lowercase hex digest (64 characters).
    """
    acc = accumulate(parent_id, timestamp, message)
    return hashlib.sha256(str(acc).encode("utf-8")).hexdigest()
