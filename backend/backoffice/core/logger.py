import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from backoffice.core.config import settings

# Include the function name so service logs point at the failing operation
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s"
LOG_LEVEL = logging.getLevelName(settings.LOG_LEVEL.upper())

# Project root is backend/, two levels above backoffice/core
PROJECT_ROOT = Path(__file__).parent.parent.parent
LOG_DIR = Path(settings.LOG_DIR) if settings.LOG_DIR else PROJECT_ROOT / "logs"
LOG_DIR.mkdir(parents=True, exist_ok=True)


def _rotating_handler(path: Path, formatter: logging.Formatter, level: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def setup_logger(name: str, level: int = None) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level or LOG_LEVEL)

    # Modules may be re-imported (tests, reload); never stack handlers
    logger.handlers = []
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)
    logger.addHandler(console_handler)

    file_name = name.replace('.', '_')
    logger.addHandler(_rotating_handler(LOG_DIR / f"{file_name}.log", formatter, logging.DEBUG))
    logger.addHandler(_rotating_handler(LOG_DIR / f"{file_name}_error.log", formatter, logging.ERROR))

    return logger
