import logging

from streamctl.config import Config
from streamctl.cli import cli

# Setup the main logger
logging.basicConfig(level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
                    format='%(asctime)s - %(levelname)s - %(message)s')

if __name__ == '__main__':
    cli(obj={})
