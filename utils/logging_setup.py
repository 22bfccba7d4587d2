import logging
from datetime import datetime

import config

def setup_logging():
    """Configure and set up logging for the application"""
    handlers = [logging.StreamHandler()]
    if config.LOG_TO_FILE:
        handlers.insert(0, logging.FileHandler(f"amm_console_log_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"))

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )
    logger = logging.getLogger()
    return logger

# Create a global logger instance
logger = setup_logging()
