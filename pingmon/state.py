from __future__ import annotations

import threading

from pingmon.checks.results import CheckOutcome


class ResultStore:
    """Latest outcome per target. Entries are only ever overwritten, never removed."""

    def __init__(self) -> None:
        self._results: dict[str, CheckOutcome] = {}
        self._lock = threading.Lock()

    def upsert(self, target: str, outcome: CheckOutcome) -> None:
        with self._lock:
            self._results[target] = outcome

    def snapshot(self) -> dict[str, CheckOutcome]:
        # CheckOutcome is frozen, so a shallow copy is independent of later writes.
        with self._lock:
            return dict(self._results)
