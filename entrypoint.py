import sys

import uvicorn
from constants import HOST, LOG_FILE, LOG_LEVEL, PORT
from logging_config import setup_logging

# Setup logging before importing app
setup_logging(log_level=LOG_LEVEL, log_file=LOG_FILE)

from app import app
from logging_config import get_logger

logger = get_logger(__name__)


def main():
    logger.info(f"server listening on {HOST}:{PORT}")
    try:
        uvicorn.run(app, host=HOST, port=PORT, log_config=None)
    except OSError as e:
        logger.critical(f"server failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
