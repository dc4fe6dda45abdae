import os
import logging
from typing import Optional


def init_logger(level: str = "INFO", log_file: Optional[str] = None):
    """Initialize the webscrapper default logger.
    Log lines go to stderr so they never mix with the echoed page on stdout.
    """
    if log_file is None:
        log_file = os.path.join(os.getcwd(), "webscrapper.log")

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(module)s.%(funcName)s:%(lineno)d %(message)s",
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )
