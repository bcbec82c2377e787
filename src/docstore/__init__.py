"""
docstore: single-collection CRUD over a MongoDB-compatible document database.

    conn = MongoConnection.connect("mongodb://localhost:27017")
    tasks = MongoCrud("rust-cosmos-demo", "tasks", conn)
    task_id = tasks.create({"title": "Pay bill", "completed": False})
"""

from .config import Config
from .db import Crud, MongoConnection, MongoCrud, MongoDatabaseHandle
from .db.mongodb import connect_from_config
from .exceptions import DatabaseConnectionError, DatabaseError, OperationError

__version__ = "0.1"

__all__ = [
    'Config',
    'Crud',
    'MongoConnection',
    'MongoCrud',
    'MongoDatabaseHandle',
    'connect_from_config',
    'DatabaseError',
    'DatabaseConnectionError',
    'OperationError',
]
