import logging
import sys

_NOISY_LOGGERS = ("httpx", "httpcore", "openai")


class Log:
    """Process-wide logger for the extraction pipeline."""

    _logger: logging.Logger = logging.getLogger("structextract")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Attach a stdout handler once and apply the level.

        HTTP client libraries stay at WARNING unless DEBUG is requested.
        """
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        cls._logger.propagate = False
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(
                logging.DEBUG if level == "DEBUG" else logging.WARNING
            )

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

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log an error with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)
