"""
  Logging configuration of the 'seqalgo' namespace
"""
import logging
import sys


def setup_logging(level=logging.INFO, log_file=None):
    """
    Sends the records of the 'seqalgo' loggers to stdout,
    and also to `log_file` if one is given (the file is overwritten)
    Returns the 'seqalgo' logger
    """
    logger = logging.getLogger("seqalgo")
    logger.setLevel(level)

    # avoid duplicate records when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
