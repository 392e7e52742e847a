"""Access log lines for served requests."""

from __future__ import annotations

import logging


def level_for_status(status: int) -> int:
    """Logging level for a response: errors for server failures, debug otherwise."""
    return logging.ERROR if 500 <= status <= 599 else logging.DEBUG


def format_access_line(
    remote_addr: str, request_line: str, body_size: int, status: int, duration_ms: float
) -> str:
    """Format one access log line."""
    return (
        f'{remote_addr} "{request_line}" {body_size} {status} '
        f"(took {duration_ms:.6f} ms to serve)"
    )