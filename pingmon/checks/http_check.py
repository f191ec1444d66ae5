from __future__ import annotations

import logging
import threading
import time
from typing import Any

import requests

from pingmon.checks.results import CheckOutcome

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "https://"
KNOWN_SCHEMES = ("http://", "https://")


def normalize_target(target: str) -> str:
    target = target.strip()
    if not target:
        raise ValueError("target is empty")
    if target.startswith(KNOWN_SCHEMES):
        return target
    return DEFAULT_SCHEME + target


def _dispatch(get, url: str, timeout_s: float, start: float, result: dict[str, Any]) -> None:
    try:
        r = get(url, timeout=(timeout_s, timeout_s), stream=True)
    except Exception as e:
        result["exc"] = e
        return
    try:
        result["elapsed_ms"] = (time.perf_counter() - start) * 1000
        result["status_code"] = r.status_code
    finally:
        # body is never read
        r.close()


def run_http(
    target: str,
    timeout_s: float = 5.0,
    session: requests.Session | None = None,
) -> CheckOutcome:
    """
    Single GET against ``target``, bounded end to end by ``timeout_s``.

    requests only bounds connect and each socket read, so the call runs on a
    helper thread and the caller stops waiting at the deadline. A late
    response is closed by the helper when it finally arrives.

    Any HTTP response counts as reachable, 4xx/5xx included; only request
    construction and transport errors (or the deadline) fail.
    """
    try:
        url = normalize_target(target)
    except ValueError as e:
        return CheckOutcome.failed(f"Failed to create request: {e}")

    get = session.get if session is not None else requests.get
    result: dict[str, Any] = {}
    start = time.perf_counter()
    t = threading.Thread(
        target=_dispatch,
        args=(get, url, timeout_s, start, result),
        name=f"pingmon-http-{url}",
        daemon=True,
    )
    t.start()
    t.join(timeout_s)

    if t.is_alive():
        return CheckOutcome.failed(f"Request failed: timed out after {timeout_s:.2f} s")

    exc = result.get("exc")
    if isinstance(exc, ValueError):
        # InvalidURL, MissingSchema and InvalidSchema are ValueErrors too
        return CheckOutcome.failed(f"Failed to create request: {exc}")
    if exc is not None:
        return CheckOutcome.failed(f"Request failed: {exc}")

    if result["status_code"] >= 400:
        logger.debug("%s answered HTTP %s", url, result["status_code"])
    return CheckOutcome.succeeded(result["elapsed_ms"])
