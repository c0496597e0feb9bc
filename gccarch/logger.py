# gccarch/logger.py

import logging
import sys
from logging.handlers import RotatingFileHandler

import colorlog

from gccarch.paths import ensure_base_dir, get_log_file


def setup_gccarch_logger(
    log_level=logging.WARNING,
    log_to_file=False,
    log_to_console=True,
    max_bytes=1024 * 1024,
    backup_count=3,
    use_color=True,
    stream=None
):
    logger = logging.getLogger("gccarch")
    logger.setLevel(log_level)

    # Close and clear existing handlers if rerun
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    # stdout carries query results, so console logging goes to stderr
    if log_to_console:
        ch = logging.StreamHandler(stream or sys.stderr)
        ch.setLevel(log_level)
        if use_color:
            ch.setFormatter(colorlog.ColoredFormatter(
                fmt="%(log_color)s[%(levelname)s]%(reset)s %(name)s - %(message)s",
                log_colors={
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "bold_red",
                },
            ))
        else:
            ch.setFormatter(logging.Formatter("[%(levelname)s] %(name)s - %(message)s"))
        logger.addHandler(ch)

    # file handler (rotating)
    if log_to_file:
        ensure_base_dir()
        fh = RotatingFileHandler(
            get_log_file(),
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        fh.setLevel(log_level)
        file_fmt = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        fh.setFormatter(file_fmt)
        logger.addHandler(fh)

    logger.debug("gccarch logger configured. use_color: %s, log_to_file: %s", use_color, log_to_file)
    return logger
