"""
Test support: an in-memory admin server stub.
"""

from .admin_stub import AdminStubServer, StreamRepository, create_admin_app

__all__ = ['AdminStubServer', 'StreamRepository', 'create_admin_app']
