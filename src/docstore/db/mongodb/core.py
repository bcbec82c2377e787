"""
MongoDB connection and database handles.
Contains MongoConnection and MongoDatabaseHandle classes.
"""

import logging
from typing import Any, Dict, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from ..core_manager import CoreManager
from ...exceptions import DatabaseConnectionError


class MongoDatabaseHandle:
    """Named-database accessor. Holds nothing but the driver's database view."""

    def __init__(self, db: Database):
        self._db = db

    @property
    def name(self) -> str:
        return self._db.name

    def collection(self, name: str) -> Collection:
        """
        Gets handle to a collection in the database.
        The collection is created by the server on first write if it doesn't exist.
        """
        return self._db[name]


class MongoConnection(CoreManager):
    """MongoDB implementation of the connection handle"""

    def __init__(self, client: MongoClient):
        self._client: Optional[MongoClient] = client

    @property
    def id_field(self) -> str:
        return "_id"

    @property
    def is_closed(self) -> bool:
        return self._client is None

    @classmethod
    def connect(cls, connection_str: str, timeout_ms: Optional[int] = None, verify: bool = True) -> "MongoConnection":
        """
        Establishes a connection to the mongo server with the given connection string.

        The string carries host, credentials, tls configuration etc. and is parsed by
        the driver. With `verify` set a ping is sent so an unreachable server or a
        rejected handshake fails here instead of on the first operation. No retry.
        """
        options: Dict[str, Any] = {}
        if timeout_ms is not None:
            options["serverSelectionTimeoutMS"] = timeout_ms

        try:
            client: MongoClient = MongoClient(connection_str, **options)
        # the URI parser reports bad ports and option values with ValueError/TypeError
        except (PyMongoError, ValueError, TypeError) as e:
            logging.error(f"MongoConnection: Invalid connection string: {e}")
            raise DatabaseConnectionError(e) from e

        if verify:
            try:
                client.admin.command('ping')
            except PyMongoError as e:
                logging.error(f"MongoConnection: Server did not answer ping: {e}")
                client.close()
                raise DatabaseConnectionError(e) from e

        logging.info(f"MongoConnection: Connected to {cls._describe(client)}")
        return cls(client)

    def database(self, name: str) -> MongoDatabaseHandle:
        """
        Gets handle to a database.
        The database is created by the server on first write if it doesn't exist.
        """
        return MongoDatabaseHandle(self.get_connection()[name])

    def get_connection(self) -> MongoClient:
        """Get the MongoClient instance"""
        if self._client is None:
            raise DatabaseConnectionError(message="MongoDB connection is closed")
        return self._client

    def close(self) -> None:
        """Close MongoDB connection"""
        if self._client is not None:
            self._client.close()
            self._client = None
            logging.info("MongoConnection: Connection closed")

    @staticmethod
    def _describe(client: MongoClient) -> str:
        # credentials never reach the log
        nodes = getattr(client.topology_description, "server_descriptions", lambda: {})()
        return ", ".join(f"{host}:{port}" for host, port in nodes) or "mongodb"
