import logging

LIBRARY_VERSION = "0.1.0"

LOG_FORMAT = "[%(levelname)s] %(asctime)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
