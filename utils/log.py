import logging
from logging.handlers import RotatingFileHandler

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("chirpy")


def configure_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Attach console (and optional rotating file) handlers once."""
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not logger.handlers:
        formatter = logging.Formatter(FORMAT, DATE_FORMAT)

        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

        if log_file:
            file_handler = RotatingFileHandler(log_file, maxBytes=10_000_000, backupCount=5)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
