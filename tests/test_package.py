import importlib
import logging
import sys
import types

import streamctl
from streamctl.config import Config, TestingConfig
from streamctl.services import StreamClient


def test_create_client_uses_config():
    client = streamctl.create_client(TestingConfig)

    assert isinstance(client, StreamClient)
    assert client.base_url == TestingConfig.ADMIN_SERVER_URL
    client.close()


def test_setup_logging_attaches_stdout_handler():
    logger = logging.getLogger('streamctl')
    before = list(logger.handlers)

    try:
        streamctl.setup_logging(TestingConfig)

        added = [handler for handler in logger.handlers if handler not in before]
        assert len(added) == 1
        assert isinstance(added[0], logging.StreamHandler)
        assert logger.level == logging.INFO
    finally:
        for handler in list(logger.handlers):
            if handler not in before:
                logger.removeHandler(handler)


def test_package_does_not_depend_on_a_top_level_config_module(monkeypatch):
    monkeypatch.setitem(sys.modules, 'config', types.ModuleType('config'))

    import streamctl.cli
    importlib.reload(streamctl.cli)

    assert streamctl.cli.Config is Config
    assert Config.__module__ == 'streamctl.config'
