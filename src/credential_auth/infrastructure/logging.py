"""Process logging setup for credential tooling."""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str) -> int:
    """Return numeric logging level for a name, falling back to INFO."""

    normalized = level.strip().upper() or "INFO"
    resolved = logging.getLevelName(normalized)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str) -> None:
    """Send process logs to stderr so stdout stays reserved for command output."""

    logging.basicConfig(
        level=resolve_log_level(level),
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )
