"""Logging configuration for the asset loader."""

import logging
import typing
from enum import StrEnum

from src import settings


class ConsoleColour(StrEnum):
    """ANSI escape sequences used by the colour formatter.

    <https://en.wikipedia.org/wiki/ANSI_escape_code#Select_Graphic_Rendition_parameters>
    """

    RESET = "\033[0m"
    BLACK = "\033[30m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    LIGHT_GREY = "\033[37m"
    HIGHLIGHT_RED = "\033[41m"
    BOLD = "\033[1m"


class PlainConsoleFormatter(logging.Formatter):
    """Console formatter without colour."""

    fmt = "{asctime} - {name} - {levelname} - {message}"
    style = "{"

    def _template(self, *_: typing.Any, **__: typing.Any) -> str:
        return self.fmt

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified log record as text."""
        formatter = logging.Formatter(self._template(record), style=self.style)  # type: ignore[arg-type]
        return formatter.format(record)


class ColourConsoleFormatter(PlainConsoleFormatter):
    """Console formatter that colours each line by level."""

    COLOURS = {
        logging.DEBUG: ConsoleColour.LIGHT_GREY,
        logging.INFO: ConsoleColour.BLUE,
        logging.WARNING: ConsoleColour.YELLOW,
        logging.ERROR: ConsoleColour.RED,
        logging.CRITICAL: ConsoleColour.BOLD + ConsoleColour.HIGHLIGHT_RED + ConsoleColour.BLACK,
    }

    def _template(self, record: logging.LogRecord) -> str:
        colour = self.COLOURS.get(record.levelno, ConsoleColour.RESET)
        return f"{colour}{self.fmt}{ConsoleColour.RESET}"


def build_handler(colour: bool) -> logging.Handler:
    """Return a stream handler at the configured level."""
    handler = logging.StreamHandler()
    handler.setLevel(settings.LOG_LEVEL)
    handler.setFormatter(ColourConsoleFormatter() if colour else PlainConsoleFormatter())
    return handler


LOGGER = logging.getLogger(settings.LOGGER_NAME)
LOGGER.setLevel(settings.LOG_LEVEL)
if not LOGGER.handlers:  # pragma: nocover
    LOGGER.addHandler(build_handler(settings.LOG_COLOUR_ENABLED))
