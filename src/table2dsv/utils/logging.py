"""Logging utilities.

Two loggers are used by the package:

``table2dsv.output``
    Carries the conversion result.  Records are written to standard output
    with a message-only format so the log line *is* the converted table.
``table2dsv``
    Parent of every diagnostic logger (``get_logger(__name__)``).  Records go
    to standard error.

:func:`configure_logging` is idempotent: handlers installed by a previous call
are removed before new ones are attached.  Unless explicit streams are given,
handlers look up ``sys.stdout``/``sys.stderr`` when a record is emitted, so
test runners that swap the standard streams capture the output.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER_NAME = "table2dsv"
OUTPUT_LOGGER_NAME = "table2dsv.output"
DIAGNOSTIC_FORMAT = "%(levelname)s %(name)s: %(message)s"

_HANDLER_MARK = "_table2dsv_handler"


class _StdStreamHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler bound to a ``sys`` attribute rather than a stream object."""

    def __init__(self, attr: str) -> None:
        self._attr = attr
        super().__init__()

    @property  # type: ignore[override]
    def stream(self) -> TextIO:
        return getattr(sys, self._attr)  # type: ignore[no-any-return]

    @stream.setter
    def stream(self, value: TextIO) -> None:
        # Always follows sys.<attr>; setStream() has no effect.
        pass


def _level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.WARNING)  # type: ignore[no-any-return]


def _handler(stream: TextIO | None, attr: str, fmt: str) -> logging.Handler:
    handler: logging.Handler
    if stream is None:
        handler = _StdStreamHandler(attr)
    else:
        handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _HANDLER_MARK, True)
    return handler


def _replace_handlers(logger: logging.Logger, handler: logging.Handler) -> None:
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            logger.removeHandler(existing)
    logger.addHandler(handler)


def configure_logging(
    level: int | str = logging.WARNING,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Attach the output and diagnostic handlers.

    Parameters
    ----------
    level:
        Threshold for diagnostic records, as a ``logging`` constant or a level
        name such as ``"INFO"``.
    stdout, stderr:
        Streams to write to.  Default to whatever ``sys.stdout`` and
        ``sys.stderr`` are at emit time.
    """

    diagnostics = logging.getLogger(ROOT_LOGGER_NAME)
    diagnostics.setLevel(_level(level))
    _replace_handlers(diagnostics, _handler(stderr, "stderr", DIAGNOSTIC_FORMAT))

    output = logging.getLogger(OUTPUT_LOGGER_NAME)
    output.setLevel(logging.INFO)
    output.propagate = False
    _replace_handlers(output, _handler(stdout, "stdout", "%(message)s"))


def get_logger(name: str) -> logging.Logger:
    """Return a logger placed under the ``table2dsv`` namespace."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def emit_output(text: str) -> None:
    """Write ``text`` as one informational record on the output logger."""

    logging.getLogger(OUTPUT_LOGGER_NAME).info(text)


__all__ = [
    "ROOT_LOGGER_NAME",
    "OUTPUT_LOGGER_NAME",
    "configure_logging",
    "get_logger",
    "emit_output",
]
