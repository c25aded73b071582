import logging
import os
from logging.handlers import RotatingFileHandler

logging.basicConfig(level=logging.WARN)
logger = logging.getLogger("transformview.view")

LOG_FILE = os.environ.get("TRANSFORMVIEW_LOG_FILE", "/tmp/transformview.log")


def add_file_handler(path:str = LOG_FILE) -> RotatingFileHandler:
    """Mirror the view logger into a rotating log file.

    Called by the application at start-up; importing the library alone
    never touches the filesystem.
    """
    file_handler = RotatingFileHandler(path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s %(filename)s:%(lineno)d: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(file_handler)
    return file_handler


log_level_env:str|None = os.environ.get("LOG_LEVEL", None)
if log_level_env:
    levels_by_name = logging.getLevelNamesMapping()
    level = levels_by_name[log_level_env.upper()]

    logger.setLevel(level)
    logger.propagate = False
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)

else:
    logger.setLevel(logging.WARN)
