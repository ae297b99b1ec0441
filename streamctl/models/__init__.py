"""
Data models for stream resources returned by the admin server.
"""

from .stream_definition import StreamDefinition, StreamPage, PageRequest, DeploymentStatus

__all__ = [
    'StreamDefinition',
    'StreamPage',
    'PageRequest',
    'DeploymentStatus'
]
