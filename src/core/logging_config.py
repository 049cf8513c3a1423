"""Structured logging for library modules.

Modules log structured events through structlog. Processors and
renderers are left to the application that imports FSS.
"""

from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger bound to the caller's structlog setup.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A lazily configured structlog logger.
    """
    return structlog.get_logger(name)
