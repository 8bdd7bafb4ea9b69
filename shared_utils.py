"""Shared utilities for the race sheet bot."""
import logging
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
LOGS = PROJECT_ROOT / "logs"


def setup_logger(name, filename, log_dir=LOGS):
    """Create a logger that writes to both file and stdout."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    # Prevent duplicate handlers on re-import
    if not logger.handlers:
        fh = logging.FileHandler(str(log_dir / filename))
        fh.setFormatter(logging.Formatter('%(asctime)s [%(name)s] %(message)s'))
        logger.addHandler(fh)
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(logging.Formatter('[%(asctime)s] %(message)s'))
        logger.addHandler(ch)
    return logger
