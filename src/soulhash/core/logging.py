"""Logging setup shared by the library and the CLI.

Library modules only ever call ``logging.getLogger(__name__)``; a handler is
attached exclusively by :func:`configure_logging`, which the CLI invokes.
Per-item diagnostics (every file read, every dropped array entry) are
emitted at :data:`TRACE`, below ``DEBUG``, so ``--verbose`` stays readable.
"""

from __future__ import annotations

import logging
from typing import Final

from soulhash.core.defaults import TRACE_LEVEL

TRACE: Final[int] = TRACE_LEVEL

logging.addLevelName(TRACE, "TRACE")

_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(verbose: bool = False, *, trace: bool = False) -> logging.Handler:
    """Attach a stderr handler to the ``soulhash`` logger.

    Calling again replaces the handler installed by the previous call, so
    repeated CLI invocations in one process never stack handlers.

    Args:
        verbose: Log at ``DEBUG`` instead of ``WARNING``.
        trace: Log at :data:`TRACE`, including per-item diagnostics.
            Implies *verbose*.

    Returns:
        The handler that was installed.
    """
    global _handler

    if trace:
        level = TRACE
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger = logging.getLogger("soulhash")
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level)
    return _handler
