'''
Structured logging configuration for dbspi.

JSON log lines are rendered by orjson and written to stdout, for both
structlog loggers and stdlib loggers. Call configure_logging() once at
process startup; nothing in dbspi logs before it has run.
'''

import logging
import sys
from typing import Any

import orjson
import structlog

from dbspi.infrastructure.settings import Settings, load_settings

__all__ = ['bind_context', 'clear_context', 'configure_logging', 'get_logger']


def _render_str(event_dict: Any, **kwargs: Any) -> str:

    '''
    Render an event dict to a JSON string for the stdlib formatter.

    Returns:
        str: JSON-encoded event
    '''

    return orjson.dumps(event_dict, **kwargs).decode()


def _pre_chain() -> list[structlog.types.Processor]:

    '''Return the processors shared by structlog and stdlib records.'''

    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _route_stdlib(level: int, pre_chain: list[structlog.types.Processor]) -> None:

    '''
    Replace root handlers with a single JSON handler on stdout.

    Args:
        level (int): Numeric level applied to the root logger
        pre_chain (list): Processors run on foreign (stdlib) records
    '''

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(serializer=_render_str),
            ],
            foreign_pre_chain=pre_chain,
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def configure_logging(settings: Settings | None = None) -> Settings:

    '''
    Configure JSON logging at the level carried by settings.

    Args:
        settings (Settings | None): Settings to apply, load_settings() when None

    Returns:
        Settings: The settings that were applied
    '''

    if settings is None:
        settings = load_settings()

    level = getattr(logging, settings.log_level)
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.processors.JSONRenderer(serializer=orjson.dumps),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.BytesLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _route_stdlib(level, pre_chain)

    structlog.get_logger(__name__).debug('logging_configured', log_level=settings.log_level)
    return settings


def get_logger(name: str | None = None) -> Any:

    '''Return a structlog logger, named when name is given.'''

    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:

    '''
    Bind fields onto every subsequent log line in this context.

    Args:
        **kwargs (Any): Context fields, e.g. driver or connection_id
    '''

    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:

    '''Remove all fields bound with bind_context().'''

    structlog.contextvars.clear_contextvars()
