import logging
import sys
from typing import TextIO

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Log:
    """Process-wide logger for the report analyzer.

    The extraction and scoring core only emits debug records, so a default
    INFO configuration keeps report analysis silent.
    """

    _logger: logging.Logger = logging.getLogger("report_analyzer")

    @classmethod
    def configure(
        cls,
        log_level: str,
        stream: TextIO | None = None,
        log_format: str = _DEFAULT_FORMAT,
    ) -> None:
        """Set the level and attach a single stream handler (stderr by default).

        The CLI writes JSON to stdout, so log records go to stderr unless a
        stream is given.
        """
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(logging.Formatter(log_format))
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
