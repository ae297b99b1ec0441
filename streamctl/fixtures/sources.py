# streamctl/fixtures/sources.py

"""
Source fixtures for integration tests.

Each fixture is a value object describing how to address an external
data source. Construction validates parameters and never opens a
connection; sending test data is left to the test driver.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict

from streamctl.errors import ValidationError, require_port, require_text
from streamctl.fixtures.fixture_types import (
    DEFAULT_HOST, FIXTURE_DEFAULTS, VALID_FILE_MODES, FixtureKind
)


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


class SourceFixture(ABC):
    """Connection descriptor capability shared by all source fixtures"""

    kind: ClassVar[str]

    @abstractmethod
    def to_dsl(self) -> str:
        """Render the module fragment used in a stream definition"""

    def to_dict(self) -> Dict[str, Any]:
        descriptor = {'kind': self.kind}
        for fixture_field in fields(self):
            descriptor[fixture_field.name] = getattr(self, fixture_field.name)
        return descriptor

    def __str__(self) -> str:
        return self.to_dsl()


class _HostPortMixin:
    """Validates the host and port fields of network fixtures"""

    def __post_init__(self):
        require_text(self.host, f"{self.kind} host must not be empty")
        object.__setattr__(self, 'port', require_port(self.port))


@dataclass(frozen=True)
class HttpSource(_HostPortMixin, SourceFixture):
    kind: ClassVar[str] = FixtureKind.HTTP

    host: str = DEFAULT_HOST
    port: int = FIXTURE_DEFAULTS[FixtureKind.HTTP]['port']

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def to_dsl(self) -> str:
        return f"http --port={self.port}"


@dataclass(frozen=True)
class TcpSource(_HostPortMixin, SourceFixture):
    kind: ClassVar[str] = FixtureKind.TCP

    host: str = DEFAULT_HOST
    port: int = FIXTURE_DEFAULTS[FixtureKind.TCP]['port']

    def to_dsl(self) -> str:
        return f"tcp --port={self.port}"


@dataclass(frozen=True)
class SyslogTcpSource(_HostPortMixin, SourceFixture):
    kind: ClassVar[str] = FixtureKind.SYSLOG_TCP

    host: str = DEFAULT_HOST
    port: int = FIXTURE_DEFAULTS[FixtureKind.SYSLOG_TCP]['port']

    def to_dsl(self) -> str:
        return f"syslog-tcp --port={self.port}"


@dataclass(frozen=True)
class SyslogUdpSource(_HostPortMixin, SourceFixture):
    kind: ClassVar[str] = FixtureKind.SYSLOG_UDP

    host: str = DEFAULT_HOST
    port: int = FIXTURE_DEFAULTS[FixtureKind.SYSLOG_UDP]['port']

    def to_dsl(self) -> str:
        return f"syslog-udp --port={self.port}"


@dataclass(frozen=True)
class JmsSource(_HostPortMixin, SourceFixture):
    kind: ClassVar[str] = FixtureKind.JMS

    host: str
    port: int
    destination: str = FIXTURE_DEFAULTS[FixtureKind.JMS]['destination']

    def __post_init__(self):
        super().__post_init__()
        require_text(self.destination, "jms destination must not be empty")

    @property
    def broker_url(self) -> str:
        return f"tcp://{self.host}:{self.port}"

    def to_dsl(self) -> str:
        return f"jms --destination={self.destination}"


@dataclass(frozen=True)
class MqttSource(_HostPortMixin, SourceFixture):
    kind: ClassVar[str] = FixtureKind.MQTT

    host: str
    port: int = FIXTURE_DEFAULTS[FixtureKind.MQTT]['port']
    topic: str = FIXTURE_DEFAULTS[FixtureKind.MQTT]['topic']

    def __post_init__(self):
        super().__post_init__()
        require_text(self.topic, "mqtt topic must not be empty")

    @property
    def broker_url(self) -> str:
        return f"tcp://{self.host}:{self.port}"

    def to_dsl(self) -> str:
        return f"mqtt --url={_quote(self.broker_url)} --topics={_quote(self.topic)}"


@dataclass(frozen=True)
class RabbitSource(_HostPortMixin, SourceFixture):
    kind: ClassVar[str] = FixtureKind.RABBIT

    host: str
    port: int = FIXTURE_DEFAULTS[FixtureKind.RABBIT]['port']
    queue: str = FIXTURE_DEFAULTS[FixtureKind.RABBIT]['queue']
    username: str = 'guest'
    password: str = field(default='guest', repr=False)

    def __post_init__(self):
        super().__post_init__()
        require_text(self.queue, "rabbit queue must not be empty")

    def to_dsl(self) -> str:
        return f"rabbit --queues={self.queue} --addresses={self.host}:{self.port}"


@dataclass(frozen=True)
class FileSource(SourceFixture):
    kind: ClassVar[str] = FixtureKind.FILE

    directory: str
    file_name: str
    mode: str = FIXTURE_DEFAULTS[FixtureKind.FILE]['mode']

    def __post_init__(self):
        require_text(self.directory, "dir should not be empty nor None")
        require_text(self.file_name, "fileName should not be empty nor None")
        if self.mode not in VALID_FILE_MODES:
            raise ValidationError(f"Invalid file mode: {self.mode}")

    def to_dsl(self) -> str:
        return f"file --dir={self.directory} --pattern={self.file_name} --mode={self.mode}"


@dataclass(frozen=True)
class TailSource(SourceFixture):
    kind: ClassVar[str] = FixtureKind.TAIL

    file_name: str
    delay_ms: int = FIXTURE_DEFAULTS[FixtureKind.TAIL]['delay_ms']

    def __post_init__(self):
        require_text(self.file_name, "fileName should not be empty nor None")
        if self.delay_ms is None or int(self.delay_ms) < 0:
            raise ValidationError(f"delay_ms must be zero or greater, got {self.delay_ms}")

    def to_dsl(self) -> str:
        return f"tail --name={self.file_name} --fileDelay={self.delay_ms}"


@dataclass(frozen=True)
class TwitterSearchSource(SourceFixture):
    kind: ClassVar[str] = FixtureKind.TWITTER_SEARCH

    consumer_key: str = field(repr=False)
    consumer_secret: str = field(repr=False)
    query: str

    def __post_init__(self):
        require_text(self.consumer_key, "consumer key must not be empty")
        require_text(self.consumer_secret, "consumer secret must not be empty")
        require_text(self.query, "query must not be empty nor None")

    def to_dsl(self) -> str:
        return (f"twittersearch --consumerKey={self.consumer_key} "
                f"--consumerSecret={self.consumer_secret} --query={_quote(self.query)}")


@dataclass(frozen=True)
class TwitterStreamSource(SourceFixture):
    kind: ClassVar[str] = FixtureKind.TWITTER_STREAM

    consumer_key: str = field(repr=False)
    consumer_secret: str = field(repr=False)
    access_token: str = field(repr=False)
    access_token_secret: str = field(repr=False)

    def __post_init__(self):
        for credential in ('consumer_key', 'consumer_secret', 'access_token', 'access_token_secret'):
            require_text(getattr(self, credential), f"{credential} must not be empty")

    def to_dsl(self) -> str:
        return (f"twitterstream --consumerKey={self.consumer_key} "
                f"--consumerSecret={self.consumer_secret} "
                f"--accessToken={self.access_token} "
                f"--accessTokenSecret={self.access_token_secret}")


@dataclass(frozen=True)
class Tap(SourceFixture):
    kind: ClassVar[str] = FixtureKind.TAP

    stream_name: str

    def __post_init__(self):
        require_text(self.stream_name, "stream name must not be empty nor None")

    def to_dsl(self) -> str:
        return f"tap:stream:{self.stream_name}"


FIXTURE_CLASSES = {
    fixture_class.kind: fixture_class
    for fixture_class in (
        HttpSource, TcpSource, SyslogTcpSource, SyslogUdpSource, JmsSource, MqttSource,
        RabbitSource, FileSource, TailSource, TwitterSearchSource, TwitterStreamSource, Tap
    )
}
