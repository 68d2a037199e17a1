"""Log setup: structlog events and stdlib records share one stderr handler.

``--log-json`` switches the renderer to one JSON object per line; otherwise
events are rendered for a human, in color when stderr is a terminal.
"""

from __future__ import annotations

import logging
import sys

import structlog

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """(Re)route all logging to stderr.

    Safe to call repeatedly: the root logger is left with exactly one
    handler.  ``verbose`` lowers the ``socialgraph`` logger to DEBUG.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("socialgraph").setLevel(logging.DEBUG if verbose else logging.WARNING)
    # networkx never logs below WARNING here, even with --verbose.
    logging.getLogger("networkx").setLevel(logging.WARNING)
