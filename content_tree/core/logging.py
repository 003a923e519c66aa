"""Logging setup"""

import logging

from content_tree.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = None):
    """Configure the root logger once for the whole application"""
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    # botocore is chatty at INFO
    logging.getLogger("botocore").setLevel(logging.WARNING)
