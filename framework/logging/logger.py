import sys
from pathlib import Path
from typing import Optional
from loguru import logger
from framework.config import settings


class LogConfig:
    """Global logging configuration using Loguru."""
    @classmethod
    def setup_logging(cls, level: Optional[str] = None, to_file: Optional[bool] = None):
        logger.remove()

        # stdout belongs to the menu, so console logs go to stderr
        logger.add(
            sys.stderr,
            backtrace=True,
            diagnose=settings.DEBUG,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                "<level>{message}</level>"
            ),
            level=level or settings.LOG_LEVEL,
        )

        if to_file is None:
            to_file = settings.LOG_TO_FILE

        if to_file:
            log_dir = Path(settings.LOG_DIR)
            log_dir.mkdir(exist_ok=True)

            logger.add(
                log_dir / "app_{time:YYYY-MM-DD}.log",
                rotation="00:00",
                retention="30 days",
                compression="zip",
                enqueue=True,
                format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
                level="DEBUG",
            )

            logger.add(
                log_dir / "error_{time:YYYY-MM-DD}.log",
                level="ERROR",
                rotation="100 MB",
                enqueue=True,
            )

        logger.configure(extra={"name": "system"})


def get_logger(name: str = None):
    """Get logger instance bound to a component name."""
    if name:
        return logger.bind(name=name)
    return logger.bind(name="system")
