"""Uniform error logging for the exporter."""

from __future__ import annotations

import logging

_log = logging.getLogger("fdb_exporter")


def log_error(err: BaseException | None, msg: str) -> bool:
    """Log ``err`` with ``msg`` at error level.

    Returns True when an error was logged and False when ``err`` is None.
    An empty message is replaced by ``"error"``.
    """
    if err is None:
        return False
    if not msg:
        msg = "error"
    _log.error("%s: %s", msg, err, extra={"error": str(err)}, stacklevel=2)
    return True