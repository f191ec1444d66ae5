from __future__ import annotations

from pingmon.checks.results import CheckOutcome
from pingmon.state import ResultStore


class ResultsQuery:
    def __init__(self, store: ResultStore) -> None:
        self._store = store

    def get_results(self) -> dict[str, CheckOutcome]:
        return self._store.snapshot()

    def get_results_payload(self) -> dict[str, dict]:
        return {target: outcome.to_dict() for target, outcome in self.get_results().items()}
