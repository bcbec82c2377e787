from .base import DocumentModel
from .task import InsertableTask, Task

__all__ = ['DocumentModel', 'InsertableTask', 'Task']
