"""
Loguru logger configuration with runtime level control
"""
from loguru import logger
import sys
from pathlib import Path
from typing import Optional
from stock_tracker.config import settings


VALID_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class LoggerManager:
    """Manages application logging with runtime level control

    The console sink is installed on import. The file sink needs the
    configuration directory, so it is attached once a command has been
    bound (see ``attach_file``).
    """

    def __init__(self):
        self.current_level = settings.LOGGER.default_level.upper()
        self.console_level = settings.LOGGER.console_level.upper()
        self.file_enabled = settings.LOGGER.file_enabled
        self.log_rotation = settings.LOGGER.rotation
        self.log_retention = settings.LOGGER.retention
        self.log_file_path: Optional[Path] = None

        self.setup_logger()

    def setup_logger(self):
        """Configure logger with console and (when attached) file handlers"""
        # Remove default handler
        logger.remove()

        # Only show ERROR and above in the console to keep CLI output clean
        logger.add(
            sys.stderr,
            level=self.console_level,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                "<level>{message}</level>"
            ),
            colorize=True,
            backtrace=False,
            diagnose=False,
        )

        if self.log_file_path is not None:
            logger.add(
                str(self.log_file_path),
                level=self.current_level,
                format=(
                    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
                    "{level: <8} | "
                    "{name}:{function}:{line} - "
                    "{message}"
                ),
                rotation=self.log_rotation,
                retention=self.log_retention,
                backtrace=True,
                diagnose=False,
            )

    def attach_file(self, directory: Path) -> Optional[Path]:
        """
        Write log records to ``<directory>/<file_name>``

        Args:
            directory: Directory for the log file (created if missing)

        Returns:
            The log file path, or None when file logging is disabled
        """
        if not self.file_enabled:
            return None

        path = Path(directory) / settings.LOGGER.file_name
        if path == self.log_file_path:
            return path

        path.parent.mkdir(parents=True, exist_ok=True)
        self.log_file_path = path
        self.setup_logger()
        logger.debug(f"Logger initialized with level: {self.current_level}")
        return path

    def set_level(self, level: str) -> str:
        """
        Change log level at runtime

        Args:
            level: New log level (TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL)

        Returns:
            The new log level

        Raises:
            ValueError: If level is invalid
        """
        level_upper = level.upper()

        if level_upper not in VALID_LEVELS:
            raise ValueError(f"Invalid level '{level}'. Choose from: {', '.join(VALID_LEVELS)}")

        old_level = self.current_level
        self.current_level = level_upper

        # Re-setup logger with new level
        self.setup_logger()

        logger.debug(f"Log level changed from {old_level} to {level_upper}")
        return self.current_level


# Global logger manager instance
logger_manager = LoggerManager()

# Export logger for use throughout the application
__all__ = ["logger", "logger_manager"]
