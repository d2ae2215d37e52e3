import os
import sys
import time
import logging

LOGGER_NAME = "sentence_validator"

CONSOLE_FORMAT = "%(levelname)s - %(module)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(levelname)s - %(module)s - %(message)s"


def setup_logger():
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    return logger


logger = setup_logger()


def add_file_handler(logger, log_dir):
    """
    Full debug trace of a run, in log_dir/log_<timestamp>.log
    """
    timestr = time.strftime("%Y%m%d-%H%M%S")
    logfile_path = os.path.join(log_dir, f"log_{timestr}.log")
    os.makedirs(log_dir, exist_ok=True)

    fh = logging.FileHandler(logfile_path)
    fh.setFormatter(logging.Formatter(FILE_FORMAT))
    fh.setLevel(logging.DEBUG)
    logger.addHandler(fh)
    return fh


def add_console_handler(logger, level=logging.INFO):
    # stdout carries results only
    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    sh.setLevel(level)
    logger.addHandler(sh)
    return sh


def configure_run_logging(logger, log_dir=None, verbose=False):
    '''
    Attaches the handlers for one command-line run and returns them so the
    caller can detach them with remove_handlers.
    '''
    handlers = []
    if log_dir:
        fh = add_file_handler(logger, log_dir)
        handlers.append(fh)
        handlers.append(add_console_handler(logger, logging.DEBUG if verbose else logging.INFO))
        logger.info("Logging to %s", fh.baseFilename)
    elif verbose:
        handlers.append(add_console_handler(logger, logging.DEBUG))
    return handlers


def remove_handlers(logger, handlers):
    for handler in handlers:
        logger.removeHandler(handler)
        handler.close()
