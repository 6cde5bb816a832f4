# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.
import logging
import sys


class ColoredFormatter(logging.Formatter):

    grey = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"
    log_format = "%(levelname)s - %(message)s (%(filename)s:%(lineno)d)"

    FORMATS = {
        logging.DEBUG: grey + log_format + reset,
        logging.INFO: grey + log_format + reset,
        logging.WARNING: yellow + log_format + reset,
        logging.ERROR: red + log_format + reset,
        logging.CRITICAL: bold_red + log_format + reset,
    }

    def format(self, record: logging.LogRecord) -> str:
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


_console_handler: logging.Handler | None = None


def setup_logging(level: int) -> None:
    global _console_handler

    root_logger = logging.getLogger()
    # Replace the previous console handler
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    # Set up console handler for stderr
    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setFormatter(ColoredFormatter())

    root_logger.setLevel(level)
    root_logger.addHandler(_console_handler)
