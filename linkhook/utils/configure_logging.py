import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(home: Path, level: str = "INFO") -> None:
    """Configure the linkhook logfile.

    Args:
        home: linkhook home directory; the log is written to ``home/linkhook.log``
        level: One of DEBUG, INFO, WARN, ERROR
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "linkhook.log"

    root_logger = logging.getLogger("linkhook")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
