import logging
from logging import FileHandler, StreamHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CustomFormatter(logging.Formatter):
    def __init__(self):
        super().__init__()
        self.formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record):
        log_format = {
            logging.DEBUG: "\033[90m",  # Grey
            logging.INFO: "\033[92m",  # Green
            logging.WARNING: "\033[93m",  # Yellow
            logging.ERROR: "\033[91m",  # Red
            logging.CRITICAL: "\033[95m",  # Magenta
        }
        reset = "\033[0m"
        log_color = log_format.get(record.levelno, reset)
        formatted_msg = self.formatter.format(record)
        return f"{log_color}{formatted_msg}{reset}"


def setup_logger(name, log_file=None, level=logging.INFO):
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Console handler with custom formatting, added once per logger
    if not any(isinstance(h.formatter, CustomFormatter) for h in logger.handlers):
        console_handler = StreamHandler()
        console_handler.setFormatter(CustomFormatter())
        logger.addHandler(console_handler)

    # File handler if log_file is provided
    if log_file:
        file_handler = FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger
