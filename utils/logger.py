# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def setup_logger(log_dir: str | Path = "data/logs", level: int = logging.INFO):
    """
    Configure the "storefront" logger: console plus a log file that
    rotates at midnight (7 days kept).

    Module loggers ("storefront.cart", "storefront.promo", ...) are
    children of this one and propagate to its handlers. Calling this
    again returns the same logger without adding handlers.
    """
    logger = logging.getLogger("storefront")
    logger.setLevel(level)
    if logger.handlers:
        return logger

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = TimedRotatingFileHandler(
        filename=log_dir / "storefront.log",
        when="midnight",
        backupCount=7,
        encoding="utf-8",
    )
    console_handler = logging.StreamHandler()

    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging to {log_dir} (level {logging.getLevelName(level)})")
    return logger
