import logging

LOGGER_NAME = "preflight"

def setup_logger(level=logging.WARNING):
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")
        h.setFormatter(fmt)
        logger.addHandler(h)
    logger.setLevel(level)
    return logger

def get_logger(name: str) -> logging.Logger:
    """Child logger under the package logger, e.g. ``preflight.connectors``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
