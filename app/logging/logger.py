import logging
import sys
from typing import TextIO


class Log:
    """Process-wide logger for the document analyzer.

    Records go to stderr by default so stdout stays free for the JSON
    payload printed by the command-line entry point.
    """

    _logger: logging.Logger = logging.getLogger("document_analyzer")
    _format = "%(asctime)s [%(levelname)s] %(message)s"

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single stream handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(logging.Formatter(cls._format))
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log an error message with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
