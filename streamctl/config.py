# streamctl/config.py

import os
import logging
from dotenv import load_dotenv
from logging.handlers import RotatingFileHandler

load_dotenv()


class Config:
    # Admin server connection
    ADMIN_SERVER_URL = os.environ.get('ADMIN_SERVER_URL') or 'http://localhost:9393'
    REQUEST_TIMEOUT = int(os.environ.get('REQUEST_TIMEOUT', 30))

    # Read retries (list operations only, writes are never retried)
    READ_RETRY_ATTEMPTS = int(os.environ.get('READ_RETRY_ATTEMPTS', 3))
    READ_RETRY_DELAY = float(os.environ.get('READ_RETRY_DELAY', 2))

    # Paging
    DEFAULT_PAGE_SIZE = int(os.environ.get('DEFAULT_PAGE_SIZE', 20))

    # JMS broker used by the jms source fixture
    JMS_HOST = os.environ.get('JMS_HOST')
    JMS_PORT = int(os.environ.get('JMS_PORT', 61616))

    # RabbitMQ broker (also serves MQTT for the mqtt source fixture)
    RABBIT_HOST = os.environ.get('RABBIT_HOST')
    RABBIT_PORT = int(os.environ.get('RABBIT_PORT', 5672))
    RABBIT_USERNAME = os.environ.get('RABBIT_USERNAME', 'guest')
    RABBIT_PASSWORD = os.environ.get('RABBIT_PASSWORD', 'guest')
    MQTT_PORT = int(os.environ.get('MQTT_PORT', 1883))

    # Twitter credentials for the social feed fixtures
    TWITTER_CONSUMER_KEY = os.environ.get('TWITTER_CONSUMER_KEY')
    TWITTER_CONSUMER_SECRET = os.environ.get('TWITTER_CONSUMER_SECRET')
    TWITTER_ACCESS_TOKEN = os.environ.get('TWITTER_ACCESS_TOKEN')
    TWITTER_ACCESS_TOKEN_SECRET = os.environ.get('TWITTER_ACCESS_TOKEN_SECRET')

    # Admin server stub
    STUB_HOST = os.environ.get('STUB_HOST', '127.0.0.1')
    STUB_PORT = int(os.environ.get('STUB_PORT', 9393))

    # Logging configuration
    LOG_TO_STDOUT = os.environ.get('LOG_TO_STDOUT')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR', 'logs')
    LOG_FILE_MAX_BYTES = 10240000
    LOG_FILE_BACKUP_COUNT = 10

    @classmethod
    def init_logging(cls, logger=None):
        """Attach handlers to the package logger according to configuration"""
        logger = logger or logging.getLogger('streamctl')
        level = getattr(logging, str(cls.LOG_LEVEL).upper(), logging.INFO)

        if cls.LOG_TO_STDOUT:
            handler = logging.StreamHandler()
        else:
            if not os.path.exists(cls.LOG_DIR):
                os.mkdir(cls.LOG_DIR)
            handler = RotatingFileHandler(
                os.path.join(cls.LOG_DIR, 'streamctl.log'),
                maxBytes=cls.LOG_FILE_MAX_BYTES,
                backupCount=cls.LOG_FILE_BACKUP_COUNT
            )
        handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        handler.setLevel(level)
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.info('streamctl logging initialized')
        return logger


class TestingConfig(Config):
    __test__ = False

    ADMIN_SERVER_URL = 'http://127.0.0.1:9393'
    REQUEST_TIMEOUT = 5
    READ_RETRY_ATTEMPTS = 1
    READ_RETRY_DELAY = 0
    LOG_TO_STDOUT = 'True'

    JMS_HOST = 'localhost'
    RABBIT_HOST = 'localhost'
    TWITTER_CONSUMER_KEY = 'test-consumer-key'
    TWITTER_CONSUMER_SECRET = 'test-consumer-secret'
    TWITTER_ACCESS_TOKEN = 'test-access-token'
    TWITTER_ACCESS_TOKEN_SECRET = 'test-access-token-secret'
