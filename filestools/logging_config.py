"""
Structured logging setup.

filestools logs through structlog routed into stdlib logging, so the host
application's levels and handlers decide what is shown. Package loggers are
wrapped with their own processor chain via get_logger(), leaving the global
structlog configuration to the host. Call configure_logging() to set the
package log level, an optional log file and the renderer from Settings.
"""

import logging
from typing import Optional

import structlog

from filestools.config import Settings, get_settings


PACKAGE_LOGGER = "filestools"

_HANDLER_MARK = "_filestools_handler"


class _SwitchableRenderer:
    """Final processor that renders as JSON or console text on demand."""

    def __init__(self):
        self.json_output = False
        self._json = structlog.processors.JSONRenderer()
        self._console = structlog.dev.ConsoleRenderer(colors=False)

    def __call__(self, logger, method_name, event_dict):
        renderer = self._json if self.json_output else self._console
        return renderer(logger, method_name, event_dict)


_renderer = _SwitchableRenderer()

# Shared by every package logger; reconfiguring only flips the renderer
_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    _renderer,
]


def get_logger(name: str):
    """Return a structlog logger over the stdlib logger `name` with the package chain."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def json_output_enabled() -> bool:
    """Whether package loggers currently render JSON."""
    return _renderer.json_output


def set_json_output(enabled: bool) -> None:
    """Switch package loggers between JSON and console rendering."""
    _renderer.json_output = enabled


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure the package logger from settings.

    Sets the level of the 'filestools' logger and, when settings.log_file
    is set, attaches a file handler to it. Records still propagate to the
    host's root handlers. Calling again replaces the file handler and
    re-applies settings.log_json, also for loggers that already emitted.

    Args:
        settings: Settings to use (default: global settings)

    Returns:
        The configured 'filestools' stdlib logger
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper())

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in [h for h in package_logger.handlers if getattr(h, _HANDLER_MARK, False)]:
        package_logger.removeHandler(handler)
        handler.close()

    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        setattr(file_handler, _HANDLER_MARK, True)
        package_logger.addHandler(file_handler)

    set_json_output(settings.log_json)
    return package_logger
