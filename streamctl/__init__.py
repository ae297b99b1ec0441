"""
streamctl Package
Client and integration-test tooling for a stream-processing admin server.
"""

import logging

from streamctl.config import Config
from streamctl.services import StreamClient

# Version info
__version__ = '1.0.0'
__description__ = 'Stream admin client and integration test fixtures'

logging.getLogger(__name__).addHandler(logging.NullHandler())


def setup_logging(config_class=Config):
    """Configure package logging from configuration"""
    return config_class.init_logging(logging.getLogger(__name__))


def create_client(config_class=Config, **kwargs) -> StreamClient:
    """Create a StreamClient for the configured admin server"""
    return StreamClient.from_config(config_class, **kwargs)
