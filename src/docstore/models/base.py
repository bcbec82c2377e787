from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel

T = TypeVar('T', bound='DocumentModel')


class DocumentModel(BaseModel):
    """
    Typed record that maps to and from a stored document.

    This is the only place field semantics live; the CRUD layer treats
    documents as opaque key/value data.
    """

    def to_document(self) -> Dict[str, Any]:
        # python mode keeps datetime and ObjectId values as BSON-native types
        return self.model_dump(mode='python', by_alias=True)

    @classmethod
    def from_document(cls: Type[T], document: Dict[str, Any]) -> T:
        return cls.model_validate(document)
