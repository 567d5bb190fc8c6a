"""
pyshlex Logger Module

Logging for the lexer layers, built on the standard library:
- Multiple log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- Subsystem-specific loggers under the ``pyshlex`` namespace
- Structured context data
- In-memory trace buffer for tooling that inspects lexer output
- Optional file output

Author: YSNRFD
Version: 1.0.0
"""

import logging
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any, List

from pyshlex.core.config_loader import LoggingConfig, get_config
from pyshlex.exceptions import ConfigValidationError


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class LogFormatter(logging.Formatter):
    """
    Log formatter for pyshlex.

    Output looks like::

        [2024-01-01 12:00:00.000] DEBUG    [parser] parsed line {commands=2}
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and self._supports_color()

    @staticmethod
    def _supports_color() -> bool:
        """Check if the terminal supports ANSI colors."""
        if not hasattr(sys.stderr, 'isatty'):
            return False
        return sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]

        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"

        components = [f"[{timestamp}]", level_display]

        if hasattr(record, 'subsystem'):
            components.append(f"[{record.subsystem}]")

        components.append(str(record.getMessage()))

        if hasattr(record, 'context') and record.context:
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            components.append(f"{{{context_str}}}")

        message = " ".join(components)

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class TraceLogHandler(logging.Handler):
    """
    Keeps recent log records in memory.

    Tracing tools read classification and parse events back from here
    instead of scraping console output.
    """

    def __init__(self, max_entries: int = 10000):
        super().__init__()
        self.max_entries = max_entries
        self._log_buffer: List[dict[str, Any]] = []
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        """Store log record in buffer."""
        log_entry = {
            'timestamp': record.created,
            'level': record.levelname,
            'message': record.getMessage(),
            'subsystem': getattr(record, 'subsystem', None),
            'context': getattr(record, 'context', {}),
        }

        with self._lock:
            self._log_buffer.append(log_entry)
            if len(self._log_buffer) > self.max_entries:
                self._log_buffer = self._log_buffer[-self.max_entries:]

    def get_logs(
        self,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Retrieve logs with optional filtering."""
        with self._lock:
            logs = self._log_buffer.copy()

        if level:
            logs = [entry for entry in logs if entry['level'] == level]
        if subsystem:
            logs = [entry for entry in logs if entry['subsystem'] == subsystem]

        return logs[-limit:]

    def clear(self) -> None:
        """Clear the log buffer."""
        with self._lock:
            self._log_buffer.clear()


class Logger:
    """
    Subsystem logger for pyshlex.

    One instance exists per subsystem name. Nothing is printed until
    ``Logger.initialize`` installs handlers; before that, records go to
    whatever the host application configured for the ``pyshlex`` logger.

    Example:
        >>> log = Logger('parser')
        >>> log.debug("Parsed line", context={'commands': 2})
    """

    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    _trace_handler: Optional[TraceLogHandler] = None
    _handlers: List[logging.Handler] = []

    def __new__(cls, subsystem: str = 'lexer') -> 'Logger':
        """Get or create a logger for a subsystem."""
        with cls._lock:
            if subsystem not in cls._instances:
                instance = super().__new__(cls)
                instance._subsystem = subsystem
                instance._logger = logging.getLogger(f'pyshlex.{subsystem}')
                cls._instances[subsystem] = instance
            return cls._instances[subsystem]

    @property
    def subsystem(self) -> str:
        return self._subsystem

    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.INFO,
        log_file: Optional[str] = None,
        use_colors: bool = True,
        console_output: bool = True
    ) -> None:
        """
        Install handlers on the ``pyshlex`` logger.

        Only the first call has any effect.

        Args:
            level: Minimum log level to capture
            log_file: Optional file path for log output
            use_colors: Whether to use ANSI colors in console output
            console_output: Whether to log to stderr
        """
        with cls._lock:
            if cls._initialized:
                return

            root_logger = logging.getLogger('pyshlex')
            root_logger.setLevel(level)

            cls._trace_handler = TraceLogHandler()
            cls._trace_handler.setLevel(level)
            cls._handlers = [cls._trace_handler]

            if console_output:
                console_handler = logging.StreamHandler(sys.stderr)
                console_handler.setLevel(level)
                console_handler.setFormatter(LogFormatter(use_colors=use_colors))
                cls._handlers.append(console_handler)

            if log_file:
                file_path = Path(log_file)
                file_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_file)
                file_handler.setLevel(level)
                file_handler.setFormatter(LogFormatter(use_colors=False))
                cls._handlers.append(file_handler)

            for handler in cls._handlers:
                root_logger.addHandler(handler)

            cls._initialized = True

    @classmethod
    def shutdown(cls) -> None:
        """Remove the handlers installed by ``initialize``."""
        with cls._lock:
            root_logger = logging.getLogger('pyshlex')
            for handler in cls._handlers:
                root_logger.removeHandler(handler)
                handler.close()
            root_logger.setLevel(logging.NOTSET)
            cls._handlers = []
            cls._trace_handler = None
            cls._initialized = False

    @classmethod
    def get_trace_logs(
        cls,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Get logs from the trace buffer."""
        if cls._trace_handler is None:
            return []
        return cls._trace_handler.get_logs(level=level, subsystem=subsystem, limit=limit)

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        extra = {
            'subsystem': self._subsystem,
            'context': context or {},
        }
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, context)

    def info(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, context)

    def warning(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, context)

    def error(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, context)

    def critical(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a critical message."""
        self._log(LogLevel.CRITICAL, message, context)


def get_logger(subsystem: str) -> Logger:
    """
    Get a logger for the specified subsystem.

    Args:
        subsystem: Name of the subsystem (e.g., 'parser', 'classifier')

    Returns:
        Logger instance for the subsystem
    """
    return Logger(subsystem)


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Initialize logging from the ``logging`` configuration section.

    Args:
        config: Logging settings; the global configuration when omitted

    Raises:
        ConfigValidationError: If the level name is not a known level
    """
    config = config or get_config().logging

    level_map = {level.name: level for level in LogLevel}
    level = level_map.get(config.level.upper())
    if level is None:
        raise ConfigValidationError(
            f"Unknown log level: {config.level}",
            key="logging.level"
        )

    Logger.initialize(
        level=level,
        log_file=config.log_file,
        console_output=config.console_output
    )
