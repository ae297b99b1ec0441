# streamctl/fixtures/factory.py

import logging
from typing import Any

from streamctl.errors import ConfigurationError, ValidationError
from streamctl.fixtures.environment import TestEnvironment
from streamctl.fixtures.fixture_types import DEFAULT_HOST, FIXTURE_DEFAULTS, FixtureKind
from streamctl.fixtures.sources import (
    FileSource, HttpSource, JmsSource, MqttSource, RabbitSource, SourceFixture, SyslogTcpSource,
    SyslogUdpSource, TailSource, Tap, TcpSource, TwitterSearchSource, TwitterStreamSource
)

logger = logging.getLogger(__name__)


class Sources:
    """
    Convenience factory for source fixtures used in integration tests.

    Hosts and ports come from the test environment where no literal
    default is safe (brokers, credentials). Only one admin server and one
    container location are supported; the RabbitMQ broker also serves MQTT.
    """

    def __init__(self, environment: TestEnvironment):
        """
        Args:
            environment: Shared environment with the hosts/ports to connect to

        Raises:
            ConfigurationError: If environment is None
        """
        if environment is None:
            raise ConfigurationError("TestEnvironment can not be None")
        self.environment = environment

    def http(self, host: str = DEFAULT_HOST,
             port: int = FIXTURE_DEFAULTS[FixtureKind.HTTP]['port']) -> HttpSource:
        """HTTP source, localhost:9000 unless overridden"""
        return HttpSource(host, port)

    def tcp(self, host: str = DEFAULT_HOST,
            port: int = FIXTURE_DEFAULTS[FixtureKind.TCP]['port']) -> TcpSource:
        """TCP source, localhost:1234 unless overridden"""
        return TcpSource(host, port)

    def tail(self, delay_ms: int, file_name: str) -> TailSource:
        """
        Tail source for the given file.

        Args:
            delay_ms: On platforms that don't wait for a missing file to appear,
                how often (ms) to look for the file
            file_name: Absolute path of the file to tail
        """
        return TailSource(file_name=file_name, delay_ms=delay_ms)

    def jms(self) -> JmsSource:
        """JMS source addressing the broker from the environment"""
        return JmsSource(self.environment.require('jms_host'), self.environment.jms_port)

    def mqtt(self) -> MqttSource:
        """MQTT source addressing the (MQTT enabled) RabbitMQ broker from the environment"""
        return MqttSource(self.environment.require('rabbit_host'), self.environment.mqtt_port)

    def file(self, directory: str, file_name: str) -> FileSource:
        if directory is None:
            raise ValidationError("dir should not be None")
        return FileSource(directory, file_name)

    def rabbit_source(self) -> RabbitSource:
        env = self.environment
        return RabbitSource(
            host=env.require('rabbit_host'),
            port=env.rabbit_port,
            username=env.rabbit_username or 'guest',
            password=env.rabbit_password or 'guest'
        )

    def twitter_search(self, query: str) -> TwitterSearchSource:
        """Twitter search source for the query, credentials from the environment"""
        if query is None or not str(query).strip():
            raise ValidationError("query must not be empty nor None")
        env = self.environment
        return TwitterSearchSource(
            consumer_key=env.require('twitter_consumer_key'),
            consumer_secret=env.require('twitter_consumer_secret'),
            query=query
        )

    def twitter_stream(self) -> TwitterStreamSource:
        env = self.environment
        return TwitterStreamSource(
            consumer_key=env.require('twitter_consumer_key'),
            consumer_secret=env.require('twitter_consumer_secret'),
            access_token=env.require('twitter_access_token'),
            access_token_secret=env.require('twitter_access_token_secret')
        )

    def syslog_tcp_source(self, host: str = DEFAULT_HOST) -> SyslogTcpSource:
        """Syslog source receiving events via tcp"""
        return SyslogTcpSource(host)

    def syslog_udp_source(self, host: str = DEFAULT_HOST) -> SyslogUdpSource:
        """Syslog source receiving events via udp"""
        return SyslogUdpSource(host)

    def tap(self, stream_name: str) -> Tap:
        return Tap(stream_name)

    def create(self, kind: str, **overrides: Any) -> SourceFixture:
        """
        Build a fixture by kind tag, e.g. create('http', port=8080).

        Raises:
            ValidationError: If kind is unknown or an override is not accepted
        """
        builders = {
            FixtureKind.HTTP: self.http,
            FixtureKind.TCP: self.tcp,
            FixtureKind.TAIL: self.tail,
            FixtureKind.JMS: self.jms,
            FixtureKind.MQTT: self.mqtt,
            FixtureKind.FILE: self.file,
            FixtureKind.RABBIT: self.rabbit_source,
            FixtureKind.TWITTER_SEARCH: self.twitter_search,
            FixtureKind.TWITTER_STREAM: self.twitter_stream,
            FixtureKind.SYSLOG_TCP: self.syslog_tcp_source,
            FixtureKind.SYSLOG_UDP: self.syslog_udp_source,
            FixtureKind.TAP: self.tap,
        }
        if not FixtureKind.is_valid(kind):
            raise ValidationError(f"Unknown fixture kind: {kind}")
        builder = builders[kind]
        try:
            fixture = builder(**overrides)
        except TypeError as e:
            raise ValidationError(f"Invalid parameters for {kind} fixture: {str(e)}")
        logger.debug(f"Created {kind} fixture: {fixture!r}")
        return fixture
