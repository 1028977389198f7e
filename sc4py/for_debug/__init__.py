from logging import *
import os

log = getLogger('sc4py')
NAME2LEVEL = {
    'DEBUG': DEBUG,
    'INFO': INFO,
    'WARNING': WARNING,
    'ERROR': ERROR,
}


def set_logger(level=INFO, path=None, f_remove=False):
    """
    Setup logger
    :param level: logging level or its name.
    :param path: output log file path
    :param f_remove: remove log file when restart.
    """
    if isinstance(level, str):
        level = NAME2LEVEL[level]
    logger = getLogger()
    for sh in list(logger.handlers):
        logger.removeHandler(sh)
    logger.propagate = False
    logger.setLevel(DEBUG)
    formatter = Formatter('[%(asctime)-23s %(levelname)-4s] %(message)s')
    if path:
        # recode if user sets path
        if f_remove and os.path.exists(path):
            os.remove(path)
        sh = FileHandler(path)
        sh.setLevel(level)
        sh.setFormatter(formatter)
        logger.addHandler(sh)
    sh = StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)
    log.info("Start logging level={}".format(getLevelName(level)))


__all__ = [
    "set_logger",
]
