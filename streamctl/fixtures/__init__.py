"""
Source fixtures and the factory that builds them from a shared test environment.
"""

from .environment import TestEnvironment
from .factory import Sources
from .fixture_types import FixtureKind
from .sources import (
    SourceFixture, HttpSource, TcpSource, JmsSource, MqttSource, FileSource, TailSource,
    SyslogTcpSource, SyslogUdpSource, RabbitSource, TwitterSearchSource, TwitterStreamSource,
    Tap, FIXTURE_CLASSES
)

__all__ = [
    'TestEnvironment',
    'Sources',
    'FixtureKind',
    'SourceFixture',
    'HttpSource',
    'TcpSource',
    'JmsSource',
    'MqttSource',
    'FileSource',
    'TailSource',
    'SyslogTcpSource',
    'SyslogUdpSource',
    'RabbitSource',
    'TwitterSearchSource',
    'TwitterStreamSource',
    'Tap',
    'FIXTURE_CLASSES'
]
