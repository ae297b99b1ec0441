"""
Remote service clients.
"""

from .stream_client import StreamClient

__all__ = ['StreamClient']
