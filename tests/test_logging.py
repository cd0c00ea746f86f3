from loguru import logger

from lazytree.core.config import GeneralSettings
from lazytree.core.logging import setup_logging


def test_setup_logging_creates_log_dir(tmp_path):
    log_dir = tmp_path / "logs"
    try:
        setup_logging(debug_mode=False, log_dir=str(log_dir))
        logger.info("hello from test")
    finally:
        logger.remove()

    assert log_dir.is_dir()
    files = list(log_dir.glob("lazytree_*.log"))
    assert len(files) == 1
    assert "hello from test" in files[0].read_text(encoding="utf-8")


def test_setup_logging_from_general_settings(tmp_path):
    log_dir = tmp_path / "configured"
    settings = GeneralSettings(debug_mode=False, log_dir=str(log_dir))
    try:
        # Settings win over the keyword defaults
        setup_logging(settings=settings)
        logger.info("hello from settings")
    finally:
        logger.remove()

    files = list(log_dir.glob("lazytree_*.log"))
    assert len(files) == 1
    assert "hello from settings" in files[0].read_text(encoding="utf-8")
