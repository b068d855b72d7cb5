import logging
import sys

from pathlib import Path


def setup_logger(name='prime_frames', log_level='INFO', log_file=None) -> logging.Logger:
    """Configures a logger printing to stdout and, optionally, to a file.

    :param name:      Name of the logger. The default covers all library modules.
    :type  name:      str
    :param log_level: Name of the level, e.g. DEBUG
    :type  log_level: str
    :param log_file:  Path of a file to additionally log to
    :type  log_file:  str, NoneType
    :rtype: logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Avoid duplicated output when called repeatedly
    logger.handlers.clear()

    formatter = logging.Formatter(fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                                  datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
