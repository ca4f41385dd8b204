import logging

LOGGER_NAME = 'mandelbrot'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(level=logging.INFO):
    """
    Configure the package logger.

    Attaches a single console handler to the 'mandelbrot' logger so that
    every module logger (mandelbrot.compute, mandelbrot.viewport, ...)
    reports through it. Safe to call more than once.

    Args:
        level: Logging level, either an int or a name such as 'DEBUG'

    Returns:
        The configured logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Replace handlers from a previous call instead of stacking them
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger
