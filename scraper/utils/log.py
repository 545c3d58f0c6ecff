import logging
from pathlib import Path
from typing import Callable, Optional

from config import ACTIVE_CONFIG

Logger = Callable[[str], None]

LOGGER_NAME = "immoyield"


def setup_logging(settings: Optional[dict] = None) -> logging.Logger:
    """Konsolen- und optional File-Handler einmalig anhängen."""
    settings = settings or ACTIVE_CONFIG.LOGGING
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, str(settings.get("LEVEL", "INFO")).upper(), logging.INFO))
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    log_file = settings.get("LOG_FILE")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


def _log(logger: Optional[Logger], msg: str, level: int = logging.INFO) -> None:
    """Helper: wenn kein logger übergeben wird -> stdlib logging."""
    if logger is not None:
        logger(msg)
    else:
        get_logger("pipeline").log(level, msg)
