import logging
import sys
from typing import Any

# attributes present on every LogRecord; anything else came in through ``extra``
_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ContextFormatter(logging.Formatter):
    """Render ``key=value`` context passed as log kwargs after the message."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {k: v for k, v in vars(record).items() if k not in _RESERVED}
        if not context:
            return line
        fields = " ".join(f"{k}={v}" for k, v in sorted(context.items()))
        return f"{line} | {fields}"


class Log:
    """Process-wide logging facade for the service."""

    _logger: logging.Logger = logging.getLogger("ideanest")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                ContextFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def log(cls, level: str, message: str, **context: Any) -> None:
        """Log at a level given by name, e.g. ``"warning"``."""
        cls._logger.log(logging.getLevelName(level.upper()), message, extra=context)

    @classmethod
    def debug(cls, message: str, **context: Any) -> None:
        cls._logger.debug(message, extra=context)

    @classmethod
    def info(cls, message: str, **context: Any) -> None:
        cls._logger.info(message, extra=context)

    @classmethod
    def warning(cls, message: str, **context: Any) -> None:
        cls._logger.warning(message, extra=context)

    @classmethod
    def error(cls, message: str, **context: Any) -> None:
        cls._logger.error(message, extra=context)

    @classmethod
    def exception(cls, message: str, **context: Any) -> None:
        """Log at error level with the traceback of the exception being handled."""
        cls._logger.exception(message, extra=context)
