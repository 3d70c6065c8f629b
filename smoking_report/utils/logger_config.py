import logging
import os

from smoking_report.utils.constants import LOGS_FOLDER


def get_logger(name, log_file, level=logging.INFO):
    """Create a logger with a given name and log file."""
    os.makedirs(LOGS_FOLDER, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        file_handler = logging.FileHandler(os.path.join(LOGS_FOLDER, log_file))
        stream_handler = logging.StreamHandler()

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(formatter)
        stream_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(stream_handler)

    return logger
