# streamctl/fixtures/environment.py

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional
import logging
import os

from streamctl.errors import ConfigurationError, require_port, require_text
from streamctl.fixtures.fixture_types import FIXTURE_DEFAULTS, FixtureKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TestEnvironment:
    """
    Connection parameters shared by every fixture in a test run.

    Built once during test setup and read by Sources; never mutated.
    Values that have no safe default (broker hosts, credentials) stay None
    until configured, and asking for a fixture that needs them fails.
    """
    __test__ = False

    admin_server_url: str = 'http://localhost:9393'
    jms_host: Optional[str] = None
    jms_port: int = FIXTURE_DEFAULTS[FixtureKind.JMS]['port']
    rabbit_host: Optional[str] = None
    rabbit_port: int = FIXTURE_DEFAULTS[FixtureKind.RABBIT]['port']
    rabbit_username: Optional[str] = None
    rabbit_password: Optional[str] = field(default=None, repr=False)
    mqtt_port: int = FIXTURE_DEFAULTS[FixtureKind.MQTT]['port']
    twitter_consumer_key: Optional[str] = field(default=None, repr=False)
    twitter_consumer_secret: Optional[str] = field(default=None, repr=False)
    twitter_access_token: Optional[str] = field(default=None, repr=False)
    twitter_access_token_secret: Optional[str] = field(default=None, repr=False)

    def __post_init__(self):
        require_text(self.admin_server_url, "admin_server_url must not be empty", ConfigurationError)
        for port_field in ('jms_port', 'rabbit_port', 'mqtt_port'):
            object.__setattr__(self, port_field, require_port(getattr(self, port_field), port_field))

    @classmethod
    def from_config(cls, config) -> 'TestEnvironment':
        """Create the environment from a Config class or instance"""
        if config is None:
            raise ConfigurationError("Config can not be None")
        return cls(
            admin_server_url=config.ADMIN_SERVER_URL,
            jms_host=config.JMS_HOST,
            jms_port=config.JMS_PORT,
            rabbit_host=config.RABBIT_HOST,
            rabbit_port=config.RABBIT_PORT,
            rabbit_username=config.RABBIT_USERNAME,
            rabbit_password=config.RABBIT_PASSWORD,
            mqtt_port=config.MQTT_PORT,
            twitter_consumer_key=config.TWITTER_CONSUMER_KEY,
            twitter_consumer_secret=config.TWITTER_CONSUMER_SECRET,
            twitter_access_token=config.TWITTER_ACCESS_TOKEN,
            twitter_access_token_secret=config.TWITTER_ACCESS_TOKEN_SECRET
        )

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> 'TestEnvironment':
        """Create the environment from upper-cased variables, e.g. JMS_HOST"""
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for env_field in fields(cls):
            raw = environ.get(env_field.name.upper())
            if raw is None or raw == '':
                continue
            values[env_field.name] = raw
        logger.debug(f"Loaded test environment settings: {sorted(values)}")
        return cls(**values)

    def require(self, field_name: str) -> Any:
        """Return a configured value or raise ConfigurationError"""
        value = getattr(self, field_name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ConfigurationError(f"Test environment has no value for '{field_name}'")
        return value
