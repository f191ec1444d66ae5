from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable

from pingmon.checks.http_check import run_http
from pingmon.checks.results import CheckOutcome
from pingmon.state import ResultStore

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_S = 120.0
DEFAULT_TIMEOUT_S = 5.0

Probe = Callable[..., CheckOutcome]

IDLE = "idle"
RUNNING = "running"
STOPPED = "stopped"


class Scheduler:
    """
    Runs one probe round at start and then one per ``interval_s`` until
    stopped. Each round starts a daemon thread per target and does not wait
    for them; every thread writes its own outcome into the store.

    Stopping only ends the timer loop. Probes already started run to their
    own timeout and still record their result.
    """

    def __init__(
        self,
        targets: Iterable[str],
        store: ResultStore,
        interval_s: float = DEFAULT_INTERVAL_S,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        probe: Probe = run_http,
    ) -> None:
        self.targets = list(targets)
        self.store = store
        self.interval_s = interval_s
        self.timeout_s = timeout_s
        self._probe = probe
        self._state = IDLE
        self._state_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self.rounds = 0

    @property
    def state(self) -> str:
        return self._state

    def start(self, stop_event: threading.Event | None = None) -> None:
        with self._state_lock:
            if self._state != IDLE:
                raise RuntimeError(f"Scheduler cannot start from state {self._state!r}")
            if stop_event is not None:
                self._stop_event = stop_event
            self._state = RUNNING

        self._thread = threading.Thread(
            target=self._loop,
            name="pingmon-scheduler",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        with self._state_lock:
            if self._state == IDLE:
                self._state = STOPPED
        self._stop_event.set()

    def join(self, timeout: float | None = None) -> bool:
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _loop(self) -> None:
        try:
            self.run_round()
            # wait() returns True as soon as the event is set, False on timeout
            while not self._stop_event.wait(self.interval_s):
                self.run_round()
        finally:
            with self._state_lock:
                self._state = STOPPED
            logger.info("Monitoring stopped")

    def run_round(self) -> list[threading.Thread]:
        self.rounds += 1
        threads = []
        for target in self.targets:
            t = threading.Thread(
                target=self._check_target,
                args=(target,),
                name=f"pingmon-check-{target}",
                daemon=True,
            )
            t.start()
            threads.append(t)
        return threads

    def _check_target(self, target: str) -> None:
        logger.info("Checking %s...", target)
        try:
            outcome = self._probe(target, timeout_s=self.timeout_s)
        except Exception as e:
            logger.exception("Probe for %s raised", target)
            outcome = CheckOutcome.failed(f"Probe error: {e}")

        self.store.upsert(target, outcome)
        log = logger.info if outcome.ok else logger.warning
        log(
            "HTTP check for %s - Status: %s, Loss: %s, Avg time: %s",
            target,
            outcome.status,
            outcome.loss,
            outcome.latency or "-",
        )
