"""Hash-chained operation journal.

Every request the service handles, including rejected ones, is appended
as an entry carrying the SHA-256 of the previous entry, so any edit to
the history breaks ``verify_chain``.  Entries live in memory.
"""

from __future__ import annotations

import hashlib
import json
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

GENESIS_HASH = "0" * 64


@dataclass
class JournalEntry:
    timestamp: float
    operation: str
    outcome: str  # "ok" | "absent" | "rejected"
    data: Dict[str, Any]
    prev_hash: str
    entry_hash: str


def _digest(timestamp: float, operation: str, outcome: str, data: Dict[str, Any], prev_hash: str) -> str:
    payload = json.dumps(
        {
            "timestamp": timestamp,
            "operation": operation,
            "outcome": outcome,
            "data": data,
            "prev_hash": prev_hash,
        },
        sort_keys=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(payload.encode()).hexdigest()


class Journal:
    """Append-only journal of engine operations."""

    def __init__(self) -> None:
        self._entries: List[JournalEntry] = []
        self._prev_hash: str = GENESIS_HASH

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, operation: str, outcome: str, data: Dict[str, Any]) -> JournalEntry:
        ts = time.time()
        entry = JournalEntry(
            timestamp=ts,
            operation=operation,
            outcome=outcome,
            data=data,
            prev_hash=self._prev_hash,
            entry_hash=_digest(ts, operation, outcome, data, self._prev_hash),
        )
        self._entries.append(entry)
        self._prev_hash = entry.entry_hash
        return entry

    def entries(self) -> List[Dict[str, Any]]:
        return [asdict(e) for e in self._entries]

    def verify_chain(self) -> bool:
        """Recompute every hash and check the links."""
        prev = GENESIS_HASH
        for e in self._entries:
            if e.prev_hash != prev:
                return False
            if e.entry_hash != _digest(e.timestamp, e.operation, e.outcome, e.data, e.prev_hash):
                return False
            prev = e.entry_hash
        return True
