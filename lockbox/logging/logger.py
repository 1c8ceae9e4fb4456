import logging
import sys


class _MetaFormatter(logging.Formatter):
    """Appends keyword metadata as sorted key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        meta = getattr(record, "meta", None)
        if meta:
            pairs = " ".join(f"{key}={value}" for key, value in sorted(meta.items()))
            line = f"{line} {pairs}"
        return line


class Log:
    """Centralized logging with structured format."""

    _logger: logging.Logger = logging.getLogger("lockbox")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                _MetaFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **meta: object) -> None:
        cls._logger.info(message, extra={"meta": meta})

    @classmethod
    def error(cls, message: str, **meta: object) -> None:
        cls._logger.error(message, extra={"meta": meta})

    @classmethod
    def warning(cls, message: str, **meta: object) -> None:
        cls._logger.warning(message, extra={"meta": meta})

    @classmethod
    def debug(cls, message: str, **meta: object) -> None:
        cls._logger.debug(message, extra={"meta": meta})
