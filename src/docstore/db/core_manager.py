"""
Connection-level operations: establishing, handing out database handles, closing.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class CoreManager(ABC):
    """Owner of the live connection. Database handles are derived from it per call."""

    @classmethod
    @abstractmethod
    def connect(cls, connection_str: str, timeout_ms: Optional[int] = None, verify: bool = True) -> "CoreManager":
        """Establish a connection from a connection string"""
        pass

    @abstractmethod
    def database(self, name: str) -> Any:
        """Get a handle bound to the named database"""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close database connection"""
        pass

    @property
    @abstractmethod
    def id_field(self) -> str:
        """Get the ID field name for this database"""
        pass

    @property
    @abstractmethod
    def is_closed(self) -> bool:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
