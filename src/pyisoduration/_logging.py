"""structlog rendering for pyisoduration's own log records.

The library logs through stdlib loggers under the ``pyisoduration``
namespace and never configures handlers on import. Applications that want
those records rendered call :func:`configure_logging`, which only touches
the ``pyisoduration`` logger: the root logger, its handlers and the global
structlog configuration are left alone.

Two output modes:
- Human (default): console-formatted output to stderr
- JSON (``log_json=True``): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "pyisoduration"


class _PackageHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging, replaced on reconfigure."""


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Render pyisoduration records through structlog processors.

    Calling it again replaces the handler from the previous call. Records
    do not propagate to the root logger once configured.

    Args:
        verbose: Enable DEBUG output for pyisoduration loggers. When False,
            only WARNING and above.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = _PackageHandler(sys.stderr)
    handler.setFormatter(formatter)

    pkg_logger = logging.getLogger(LOGGER_NAME)
    for old in [h for h in pkg_logger.handlers if isinstance(h, _PackageHandler)]:
        pkg_logger.removeHandler(old)
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False
