import sys
from typing import Optional
from loguru import logger
import os

from .config import GeneralSettings

def setup_logging(debug_mode: bool = True, log_dir: str = "logs", settings: Optional[GeneralSettings] = None):
    """
    Configures Loguru sinks for a host application.

    Library code only calls ``logger``; this is meant to be invoked once by
    the application that owns the tree views, usually as
    ``setup_logging(settings=config.data.general)``. When ``settings`` is
    given it overrides ``debug_mode`` and ``log_dir``.
    """
    if settings is not None:
        debug_mode = settings.debug_mode
        log_dir = settings.log_dir

    # Remove default handler
    logger.remove()

    level = "DEBUG" if debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>")

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logger.add(os.path.join(log_dir, "lazytree_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG")

    logger.info("Logging initialized.")
