"""Logging setup"""
import sys
from pathlib import Path
from typing import Optional
from loguru import logger
from src.utils.config import config

def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """Configure logging"""
    # Remove default handler
    logger.remove()

    # Add stdout handler
    logger.add(
        sys.stdout,
        format=config.get('logging.format', '{time} | {level} | {message}'),
        level=level or config.get('logging.level', 'INFO')
    )

    log_file = log_file or config.get('logging.file')
    if log_file:
        # Create logs directory if it doesn't exist
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

        # Add file handler
        logger.add(
            log_file,
            rotation=config.get('logging.rotation', '500 MB'),
            retention=config.get('logging.retention', '10 days'),
            level="DEBUG"
        )

    # Library logs are disabled on import
    logger.enable("src.class_comparator")

    return logger
