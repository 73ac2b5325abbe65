"""Observability: structured logs (operation, trace_id, latency_ms, status) and call counters."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any

_LOGGER = logging.getLogger("adserver.interface")

# calls[operation] = count, errors[operation] = count
METRICS: dict[str, dict[str, int]] = {"calls": {}, "errors": {}}
_METRICS_LOCK = threading.Lock()


def get_logger() -> logging.Logger:
    return _LOGGER


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once for CLI entrypoints."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        root.addHandler(handler)


def log_operation(
    operation: str,
    trace_id: str | None,
    latency_ms: float,
    status: int | str,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit one structured log record per boundary call and update counters."""
    payload: dict[str, Any] = {
        "operation": operation,
        "trace_id": trace_id,
        "latency_ms": round(latency_ms, 2),
        "status": status,
    }
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    _LOGGER.info("operation_invocation", extra=payload)
    with _METRICS_LOCK:
        METRICS["calls"][operation] = METRICS["calls"].get(operation, 0) + 1
        if error:
            METRICS["errors"][operation] = METRICS["errors"].get(operation, 0) + 1


def metrics_snapshot() -> dict[str, dict[str, int]]:
    """Return current counters."""
    with _METRICS_LOCK:
        return {k: dict(v) for k, v in METRICS.items()}
