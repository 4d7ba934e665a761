import logging

from .config import settings

LOG_FILE_ENCODING = 'utf-8'

LOG_FORMAT = "%(threadName)s; %(asctime)s; %(levelname)s; %(message)s"

file_log_formatter = logging.Formatter(LOG_FORMAT, "%Y-%m-%d %H:%M:%S")
stream_log_formatter = logging.Formatter(LOG_FORMAT, "%H:%M:%S")
access_log_formatter = logging.Formatter("%(asctime)s; %(message)s", "%H:%M:%S")


def create_file_handler(path: str, level: int = logging.NOTSET) -> logging.Handler:
    handler = logging.FileHandler(path, encoding=LOG_FILE_ENCODING)
    handler.setFormatter(file_log_formatter)
    handler.setLevel(level)
    return handler


def create_stream_handler(formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    return handler


def create_logger(name: str, *handlers: logging.Handler) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL)

    for handler in handlers:
        logger.addHandler(handler)

    return logger


# Main app logger, errors are also kept in a separate file
app_logger = create_logger(
    'app-logger',
    create_file_handler(settings.LOG_FILE),
    create_file_handler(settings.ERROR_LOG_FILE, logging.ERROR),
    create_stream_handler(stream_log_formatter),
)

# One line per handled request, console only
access_logger = create_logger(
    'access-logger', create_stream_handler(access_log_formatter)
)
