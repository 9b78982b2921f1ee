import logging
import sys


class ContextFormatter(logging.Formatter):
    """Appends keyword context passed to ``Log`` calls as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            line = f"{line} {pairs}"
        return line


class Log:
    """Centralized logging with structured format.

    Keyword arguments become context fields on the record, e.g.
    ``Log.info("Reconciling document", id_number=mask_digits(value))``.
    Never pass declared values in clear.
    """

    _logger: logging.Logger = logging.getLogger("idmatch")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger level and a stderr handler.

        stdout is reserved for command output.
        """
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                ContextFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def _log(cls, level: int, message: str, context: dict[str, object]) -> None:
        cls._logger.log(level, message, extra={"context": context})

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._log(logging.INFO, message, kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._log(logging.ERROR, message, kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._log(logging.WARNING, message, kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._log(logging.DEBUG, message, kwargs)


def mask_digits(value: str, visible: int = 4) -> str:
    """Mask all but the last *visible* digits of an identifier for log output."""
    digits = "".join(ch for ch in value or "" if ch.isdigit())
    if len(digits) <= visible:
        return "X" * len(digits)
    return "X" * (len(digits) - visible) + digits[-visible:]
