"""
Logging setup for the receipt extractor
Console output and a log file share one format
"""

import logging
import sys
from pathlib import Path
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "application.log"

# HTTP libraries log every connection at DEBUG
QUIET_LOGGERS = ("urllib3", "requests")


def setup_logging(log_level: str = "INFO", log_dir: Union[str, Path] = "logs") -> Path:
    """
    Send application logs to stdout and <log_dir>/application.log

    Returns:
        Path of the log file
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / LOG_FILE_NAME

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stdout),
        ],
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_file
