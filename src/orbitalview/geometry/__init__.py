import logging
import os
from logging.handlers import RotatingFileHandler

## Environment variables read once at import.
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_LOG_FILE = "ORBITALVIEW_LOG_FILE"

STREAM_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(filename)s:%(lineno)d: %(message)s"

logger = logging.getLogger("orbitalview.geometry")


def configure_logging(level_name: str | None = None, log_file: str | None = None) -> logging.Logger:
    """Attach handlers to the geometry logger.

    Without a level the logger stays at WARNING and leaves output to the
    application's own handlers. A level switches on a stderr stream of its
    own; a file path adds a rotating log file.
    """
    if level_name:
        logger.setLevel(logging.getLevelNamesMapping()[level_name.upper()])
        logger.propagate = False
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter(STREAM_FORMAT))
        logger.addHandler(stream)
    else:
        logger.setLevel(logging.WARNING)

    if log_file:
        rotating = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=3)
        rotating.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(rotating)

    return logger


configure_logging(os.environ.get(ENV_LOG_LEVEL), os.environ.get(ENV_LOG_FILE))
