"""structlog setup for the inventory: warnings on the console, everything in a JSONL file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import structlog

from chem_inventory.config import LOG_FILE, LOG_LEVEL, VERBOSE_LOGGING

BoundLogger = structlog.stdlib.BoundLogger

_configured = False


def resolve_level(level_name: str, verbose: bool = False) -> int:
    """DEBUG when verbose, else the named or numeric level (INFO if unknown)."""
    if verbose:
        return logging.DEBUG
    if level_name.isdigit():
        return int(level_name)
    return getattr(logging, level_name.upper(), logging.INFO)


def _pre_chain() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _console_handler(level: int) -> logging.Handler:
    # Below WARNING the console would interleave with CLI tables
    handler = logging.StreamHandler()
    handler.setLevel(max(level, logging.WARNING))
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=True),
            foreign_pre_chain=_pre_chain(),
        )
    )
    return handler


def file_handler(path: Path, level: int) -> logging.Handler | None:
    """JSONL handler at path, creating its directory. None when the location is not writable."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=_pre_chain(),
        )
    )
    return handler


def _configure_logging() -> None:
    global _configured
    if _configured:
        return

    level = resolve_level(LOG_LEVEL, VERBOSE_LOGGING)
    handlers = [_console_handler(level)]
    jsonl = file_handler(LOG_FILE, level)
    if jsonl is not None:
        handlers.append(jsonl)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        root_logger.addHandler(handler)
    logging.captureWarnings(True)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    _configured = True
    if jsonl is None:
        structlog.get_logger("chem_inventory.logging").warning("logging.file_unavailable", path=str(LOG_FILE))


def get_logger(name: str = "chem_inventory", **bindings: Any) -> BoundLogger:
    """Return the structured logger, optionally bound with context."""
    if not _configured:
        _configure_logging()
    logger = structlog.get_logger(name)
    if bindings:
        logger = logger.bind(**bindings)
    return logger


def bind_context(**context: Any) -> None:
    """Bind context variables to be included with every log entry."""
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
