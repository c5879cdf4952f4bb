from __future__ import annotations
import logging, sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
LOG_FILE_NAME = "imgedit.log"

BANNER = "=" * 75

def build_logger(name: str = "imgedit",
                 log_dir: Optional[Union[str, Path]] = None,
                 level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    fmt = logging.Formatter(LOG_FORMAT)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(exist_ok=True, parents=True)
        fh = RotatingFileHandler(log_dir / LOG_FILE_NAME, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(level)
        logger.addHandler(fh)

    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(fmt)
    sh.setLevel(level)
    logger.addHandler(sh)
    return logger

class log_section:
    def __init__(self, title: str, logger: logging.Logger, level: int = logging.DEBUG):
        self.title = title
        self.logger = logger
        self.level = level

    def __enter__(self):
        self.logger.log(self.level, "\n%s\n%s\n%s", BANNER, self.title, BANNER)
        return self

    def __exit__(self, exc_type, exc, tb):
        return False
