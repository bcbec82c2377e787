"""
MongoDB database driver implementation.
"""

from typing import Optional

from ...config import Config
from .core import MongoConnection, MongoDatabaseHandle
from .documents import MongoCrud


def connect_from_config(verify: bool = True, timeout_ms: Optional[int] = None) -> MongoConnection:
    """Connect using the db_uri and timeout_ms values of the loaded Config"""
    connection_str, _, _ = Config.get_db_params()
    if timeout_ms is None:
        timeout_ms = Config.timeout_ms()
    return MongoConnection.connect(connection_str, timeout_ms=timeout_ms, verify=verify)


__all__ = ['MongoConnection', 'MongoDatabaseHandle', 'MongoCrud', 'connect_from_config']
