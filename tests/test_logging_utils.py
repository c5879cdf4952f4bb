import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from imgedit.utils.logging_utils import BANNER, build_logger, log_section

def test_build_logger_stdout_only():
    logger = build_logger("imgedit-test-stdout")
    assert len(logger.handlers) == 1
    assert not any(isinstance(h, RotatingFileHandler) for h in logger.handlers)

def test_build_logger_with_file(tmp_path: Path):
    log_dir = tmp_path / "logs"
    logger = build_logger("imgedit-test-file", log_dir=log_dir)
    logger.info("hello from the test")
    for h in logger.handlers:
        h.flush()
    assert (log_dir / "imgedit.log").read_text(encoding="utf-8").count("hello from the test") == 1
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)

def test_log_section_banner(caplog):
    logger = logging.getLogger("imgedit-test-section")
    with caplog.at_level(logging.INFO, logger="imgedit-test-section"):
        with log_section("CROP a.jpg", logger, level=logging.INFO):
            logger.info("inside")
    assert BANNER in caplog.text
    assert "CROP a.jpg" in caplog.text
    assert "inside" in caplog.text
