"""Shared fixtures"""
import sys

import pytest
from loguru import logger


@pytest.fixture
def debug_messages():
    """Collects library debug logs"""
    messages = []
    logger.enable("src.class_comparator")
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("src.class_comparator")


@pytest.fixture
def restore_logger():
    """Puts loguru back to its default handler after setup_logging()"""
    yield logger
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("src.class_comparator")
