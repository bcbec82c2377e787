"""
Database layer with clean separation of concerns.

Architecture:
- CoreManager: Connection handle (connect, database, close)
- Crud: CRUD façade for one collection (create, read, update, delete)
- mongodb: MongoDB implementations of both
"""

from .core_manager import CoreManager
from .document_manager import Crud, Document
from .mongodb import MongoConnection, MongoCrud, MongoDatabaseHandle

__all__ = ['CoreManager', 'Crud', 'Document', 'MongoConnection', 'MongoCrud', 'MongoDatabaseHandle']
