"""
Exceptions raised by the document store layer.
Driver errors are never translated: the driver exception travels on `.error`.
"""


class DatabaseError(Exception):
    """Base class for connection and operation failures."""

    def __init__(self, e=None, message=None):
        if message:
            super().__init__(message)
        elif e:
            super().__init__(str(e))
        else:
            super().__init__("Database error")
        self.error = e
        self.message = message


class DatabaseConnectionError(DatabaseError):
    """Raised when a connection cannot be established or has been closed."""

    def __init__(self, e=None, message=None):
        if not e and not message:
            message = "Database connection error"
        super().__init__(e, message)


class OperationError(DatabaseError):
    """Raised when a CRUD call fails (rejected write, bad filter, transport fault)."""

    def __init__(self, e=None, message=None, operation: str = ""):
        if not e and not message:
            message = f"Database {operation or 'operation'} failed"
        super().__init__(e, message)
        self.operation = operation
