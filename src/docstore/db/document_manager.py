"""
Document CRUD operations for a single collection.
Single-document semantics: every call touches at most one document and is one round trip.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, Optional

from ..exceptions import DatabaseError, OperationError
from .core_manager import CoreManager

Document = Dict[str, Any]


class Crud(ABC):
    """
    CRUD façade bound to (database, collection, shared connection).

    Public methods log and map failures; subclasses implement the `_*_impl` hooks
    against a collection resolved fresh for every call.
    """

    def __init__(self, database: str, collection: str, connection: CoreManager):
        self.database = database
        self.collection = collection
        self.connection = connection

    def create(self, document: Document) -> Any:
        """Insert one document and return the identifier assigned to it."""
        if not isinstance(document, Mapping):
            raise OperationError(
                message=f"Document must be a mapping, got {type(document).__name__}",
                operation="create",
            )
        if self.connection.id_field in document:
            raise OperationError(
                message=f"Document already carries '{self.connection.id_field}'; identifiers are assigned on insert",
                operation="create",
            )
        inserted_id = self._run("create", self._create_impl, dict(document))
        logging.debug(f"Crud: Inserted {inserted_id} into {self.database}.{self.collection}")
        return inserted_id

    def read(self, filter: Document) -> Optional[Document]:
        """Return the first document matching filter, or None when nothing matches."""
        doc = self._run("read", self._read_impl, filter)
        logging.debug(f"Crud: Read from {self.database}.{self.collection} matched={doc is not None}")
        return doc

    def update(self, filter: Document, update: Any) -> Optional[int]:
        """
        Update the first document matching filter.

        Returns:
            Number of documents modified (0 or 1). None only when the driver
            cannot report a count (unacknowledged write).
        """
        count = self._run("update", self._update_impl, filter, update)
        logging.debug(f"Crud: Updated {count} document(s) in {self.database}.{self.collection}")
        return count

    def delete(self, filter: Document) -> int:
        """Delete the first document matching filter and return the number deleted (0 or 1)."""
        count = self._run("delete", self._delete_impl, filter)
        logging.debug(f"Crud: Deleted {count} document(s) from {self.database}.{self.collection}")
        return count

    def _run(self, operation: str, impl, *args):
        try:
            return impl(*args)
        except DatabaseError:
            raise
        except self._driver_errors() as e:
            logging.error(f"Crud: {operation} on {self.database}.{self.collection} failed: {e}")
            raise OperationError(e, operation=operation) from e

    @abstractmethod
    def _driver_errors(self) -> tuple:
        """Exception types raised by the driver that map to OperationError"""
        pass

    @abstractmethod
    def _create_impl(self, document: Document) -> Any:
        pass

    @abstractmethod
    def _read_impl(self, filter: Document) -> Optional[Document]:
        pass

    @abstractmethod
    def _update_impl(self, filter: Document, update: Document) -> Optional[int]:
        pass

    @abstractmethod
    def _delete_impl(self, filter: Document) -> int:
        pass
