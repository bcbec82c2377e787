from datetime import datetime, timezone
from typing import Any, Dict

from bson import ObjectId
from pydantic import ConfigDict, Field

from .base import DocumentModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InsertableTask(DocumentModel):
    """Task before it gets inserted into the collection; the id is assigned on insert."""
    title: str
    category: str
    date_created: datetime = Field(default_factory=utc_now)
    due_date: datetime
    completed: bool = False


class Task(InsertableTask):
    """Task as stored in the collection, carrying its server-assigned `_id`."""
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    id: ObjectId = Field(alias='_id')

    def to_insertable(self) -> InsertableTask:
        return InsertableTask(**self.model_dump(exclude={'id'}))

    def to_document(self) -> Dict[str, Any]:
        document = super().to_document()
        # keep _id first like the server does
        return {'_id': document.pop('_id'), **document}
