# streamctl/fixtures/fixture_types.py


class FixtureKind:
    """Kind tags for source fixtures"""
    HTTP = "http"
    TCP = "tcp"
    JMS = "jms"
    MQTT = "mqtt"
    FILE = "file"
    TAIL = "tail"
    SYSLOG_TCP = "syslog-tcp"
    SYSLOG_UDP = "syslog-udp"
    RABBIT = "rabbit"
    TWITTER_SEARCH = "twittersearch"
    TWITTER_STREAM = "twitterstream"
    TAP = "tap"

    ALL = [
        HTTP, TCP, JMS, MQTT, FILE, TAIL, SYSLOG_TCP, SYSLOG_UDP,
        RABBIT, TWITTER_SEARCH, TWITTER_STREAM, TAP
    ]

    @classmethod
    def is_valid(cls, kind: str) -> bool:
        return kind in cls.ALL


DEFAULT_HOST = 'localhost'

# Literal defaults per fixture kind
FIXTURE_DEFAULTS = {
    FixtureKind.HTTP: {'port': 9000},
    FixtureKind.TCP: {'port': 1234},
    FixtureKind.SYSLOG_TCP: {'port': 5140},
    FixtureKind.SYSLOG_UDP: {'port': 5140},
    FixtureKind.TAIL: {'delay_ms': 5000},
    FixtureKind.FILE: {'mode': 'contents'},
    FixtureKind.JMS: {'port': 61616, 'destination': 'streamctl.jms.test'},
    FixtureKind.MQTT: {'port': 1883, 'topic': 'streamctl.mqtt.test'},
    FixtureKind.RABBIT: {'port': 5672, 'queue': 'streamctl.rabbit.test'},
}

VALID_FILE_MODES = ['contents', 'lines', 'ref']
