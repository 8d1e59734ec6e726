"""
Logging Configuration for the court booking client
Console output plus rotating log files for the booking workflows
"""

import logging
import logging.handlers
import os
from datetime import datetime
from typing import Optional

from tracking import t

# Define the log directory to be a fixed 'latest_log'
LOG_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'logs', 'latest_log')

# Loggers whose records also go to the dedicated workflow log
WORKFLOW_LOGGERS = (
    'BookingSubmissionOrchestrator',
    'BookingStatusFetcher',
    'LastBookingStore',
    'gateway.client',
)


def setup_logging(production_mode: Optional[bool] = None, log_dir: Optional[str] = None) -> None:
    """
    Set up logging with console, main, error and workflow handlers.

    Args:
        production_mode: Warnings and errors only when True. Read from the
            PRODUCTION_MODE environment variable when omitted.
        log_dir: Directory for log files, defaults to ``logs/latest_log``.
    """
    t('logging_config.setup_logging')
    if production_mode is None:
        production_mode = os.getenv('PRODUCTION_MODE', 'false').lower() == 'true'
    log_dir = log_dir or LOG_DIR
    os.makedirs(log_dir, exist_ok=True)

    main_log_file = os.path.join(log_dir, 'client.log')
    error_log_file = os.path.join(log_dir, 'client_errors.log')
    workflow_log_file = os.path.join(log_dir, 'booking_workflow.log')

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING if production_mode else logging.DEBUG)
    root_logger.handlers = []

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d in %(funcName)s()] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING if production_mode else logging.INFO)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    main_file_handler = logging.handlers.RotatingFileHandler(
        main_log_file,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    main_file_handler.setLevel(logging.WARNING if production_mode else logging.INFO)
    main_file_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(main_file_handler)

    error_file_handler = logging.handlers.RotatingFileHandler(
        error_log_file,
        maxBytes=5*1024*1024,  # 5MB
        backupCount=5,
        encoding='utf-8'
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(error_file_handler)

    # Submission and status lookups are kept at INFO even in production
    workflow_handler = logging.handlers.RotatingFileHandler(
        workflow_log_file,
        maxBytes=20*1024*1024,  # 20MB
        backupCount=5,
        encoding='utf-8'
    )
    workflow_handler.setLevel(logging.INFO if production_mode else logging.DEBUG)
    workflow_handler.setFormatter(detailed_formatter)
    for name in WORKFLOW_LOGGERS:
        workflow_logger = logging.getLogger(name)
        workflow_logger.addHandler(workflow_handler)
        workflow_logger.setLevel(logging.INFO if production_mode else logging.DEBUG)

    # Reduce noise from external libraries
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('telegram').setLevel(logging.INFO)

    root_logger.info("="*80)
    root_logger.info(f"Booking client logging initialized - {datetime.now()}")
    root_logger.info(f"Production Mode: {'ON' if production_mode else 'OFF'}")
    root_logger.info(f"Main log: {main_log_file}")
    root_logger.info(f"Error log: {error_log_file}")
    root_logger.info(f"Workflow log: {workflow_log_file}")
    root_logger.info("="*80)


def get_logger(name: str) -> logging.Logger:
    """Return the logger called ``name``."""
    return logging.getLogger(name)
