"""
Logging configuration for the grid filler.
Console output for progress, plus a rotating debug log file per run.
"""
#
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional


CONSOLE_FORMAT = "%(levelname)-8s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)s:%(lineno)d - %(funcName)s - %(message)s"


def setup_logging(
    output_dir: Optional[str],
    log_level: str = "INFO",
    log_file_prefix: str = "grid_filler",
    enable_console: bool = True,
) -> Optional[str]:
    """
    Configure the root logger for a fill run.

    Args:
        output_dir: Directory for the log file (None disables file logging)
        log_level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file_prefix: Prefix for the timestamped log filename
        enable_console: Whether to log to stdout

    Returns:
        Path to the log file, or None when file logging is disabled
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Handlers filter
    root_logger.handlers.clear()

    log_path = None
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = os.path.join(output_dir, f"{log_file_prefix}_{timestamp}.log")

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)
    if log_path:
        logger.debug(f"Logging initialized: {log_path}")
    logger.debug(f"Log level: {log_level}, Console: {enable_console}")

    return log_path
