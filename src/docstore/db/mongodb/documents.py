"""
MongoDB document operations implementation.
Contains the MongoCrud class with CRUD operations.
"""

from collections.abc import Mapping
from typing import Any, Optional

from bson.errors import BSONError
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ..document_manager import Crud, Document


class MongoCrud(Crud):
    """MongoDB implementation of document operations"""

    def _driver_errors(self) -> tuple:
        # pymongo validates filters and update specs client-side with ValueError/TypeError
        return (PyMongoError, BSONError, ValueError, TypeError)

    def _get_collection(self) -> Collection:
        # resolved per call so a reconnected or closed client is always seen
        return self.connection.database(self.database).collection(self.collection)

    def _create_impl(self, document: Document) -> Any:
        result = self._get_collection().insert_one(document)
        return result.inserted_id

    def _read_impl(self, filter: Document) -> Optional[Document]:
        return self._get_collection().find_one(filter)

    def _update_impl(self, filter: Document, update: Any) -> Optional[int]:
        result = self._get_collection().update_one(filter, self._build_update_spec(update))
        if not result.acknowledged:
            return None
        return result.modified_count

    def _delete_impl(self, filter: Document) -> int:
        result = self._get_collection().delete_one(filter)
        return result.deleted_count

    def _build_update_spec(self, update: Any) -> Any:
        """
        Plain field mappings become a $set. Operator documents, pipelines and anything
        else pass through unchanged for the driver to accept or reject.
        """
        if (
            isinstance(update, Mapping)
            and update
            and all(isinstance(key, str) and not key.startswith('$') for key in update)
        ):
            return {'$set': dict(update)}
        return update
