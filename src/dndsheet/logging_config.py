import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s:%(lineno)d:%(funcName)s - %(message)s'

def setup_logging(log_file: Path, level: int = logging.INFO) -> logging.Logger:
    """
    Configure logging for the wizard.

    The TUI owns the terminal while it runs, so records only go to a rotating
    file next to the settings.

    Args:
        log_file: Path of the log file; its directory is created if needed
        level: Level for the package logger
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=1_048_576,  # 1MB
        backupCount=3,
        encoding='utf-8'
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger('dndsheet')
    logger.setLevel(level)
    for h in list(logger.handlers):
        if isinstance(h, logging.handlers.RotatingFileHandler):
            logger.removeHandler(h)
            h.close()
    logger.addHandler(file_handler)
    logger.propagate = False
    return logger
