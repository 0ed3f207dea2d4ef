"""Logging setup for hosts embedding forth_lang"""

import logging

import coloredlogs

LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(name)-30s %(message)s"
DATE_FORMAT = "%H:%M:%S"


def init_logging(level="DEBUG", colours: bool = True) -> logging.Logger:
    """Send forth_lang log records to stderr at the given level"""
    root_logger = logging.getLogger("forth_lang")
    if colours:
        coloredlogs.install(
            fmt=LOG_FORMAT, datefmt=DATE_FORMAT, level=level, logger=root_logger,
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    return root_logger
