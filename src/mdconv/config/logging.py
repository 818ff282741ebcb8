"""structlog setup for mdconv's pipeline events.

Only the ``mdconv`` logger tree is configured.  Stage events
(``document.read``, ``html.written``, telemetry spans) are DEBUG and
show with ``-v``; otherwise only warnings reach stderr.  ``--log-json``
switches the console renderer for one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "mdconv"


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``mdconv.*`` structlog events to stderr.

    Safe to call once per CLI invocation: the handler on the ``mdconv``
    logger is replaced, never stacked.
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    app = logging.getLogger(APP_LOGGER)
    app.handlers[:] = [handler]
    app.setLevel(logging.DEBUG if verbose else logging.WARNING)
    app.propagate = False
