"""
Logging configuration for the sales dashboard.
"""
import os
import logging
from datetime import datetime
import threading

# Track if logging has been initialized
_logging_initialized = False
_logging_lock = threading.Lock()
_handlers = []

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level=None, log_dir=None):
    """
    Set up logging for the dashboard process.

    Streamlit reruns the page script on every interaction, so the handlers
    are only attached the first time this is called. Later calls that pass
    a log_level change the level of the existing setup.

    Args:
        log_level: Logging level (default: SALES_DASHBOARD_LOG_LEVEL or INFO)
        log_dir: Directory for log files (default: SALES_DASHBOARD_LOG_DIR or "logs")

    Returns:
        logging.Logger: Configured root logger
    """
    global _logging_initialized

    with _logging_lock:
        if _logging_initialized:
            logger = logging.getLogger()
            if log_level is not None:
                _set_level(logger, log_level)
            return logger

        if log_level is None:
            log_level = os.environ.get("SALES_DASHBOARD_LOG_LEVEL", "INFO").upper()
        if log_dir is None:
            log_dir = os.environ.get("SALES_DASHBOARD_LOG_DIR", "logs")

        os.makedirs(log_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"sales_dashboard_{timestamp}.log")

        logger = logging.getLogger()
        logger.setLevel(log_level)

        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        formatter = logging.Formatter(LOG_FORMAT)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        _handlers[:] = [file_handler, console_handler]

        # The Firebase SDK and urllib3 are chatty at DEBUG
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        logging.getLogger("google").setLevel(logging.WARNING)

        logger.info(f"Logging initialized. Log file: {log_file}")

        _logging_initialized = True

        return logger


def _set_level(logger, log_level):
    logger.setLevel(log_level)
    for handler in _handlers:
        handler.setLevel(log_level)


def get_logger(name):
    """
    Get a logger for a specific module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    if not _logging_initialized:
        setup_logging()

    return logging.getLogger(name)
