"""
User Registry API
Development entrypoint and logging setup
"""
import logging
import os
import signal
import sys

from app import create_app
from app.config import config_for_env

# Configure logging
log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

config_class = config_for_env()
app = create_app(config_class)


def _handle_sigterm(signum, frame):
    logger.info("SIGTERM received. Shutting down gracefully...")
    sys.exit(0)


if __name__ == '__main__':
    signal.signal(signal.SIGTERM, _handle_sigterm)
    port = config_class.PORT
    logger.info(f"Server running on port: {port}")
    logger.info(f"Environment: {config_class.APP_ENV}")
    logger.info(f"URL: http://localhost:{port}")
    app.run(host='0.0.0.0', port=port, debug=False, threaded=True)
