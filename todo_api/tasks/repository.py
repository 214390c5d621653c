"""
Todo Auth API - Task Repository

Repository pattern for task data access.
"""

import asyncio
import itertools
from abc import ABC, abstractmethod
from typing import List

from todo_api.errors import ValidationError
from todo_api.tasks.enums import TaskStatus
from todo_api.tasks.models import Task


class TaskRepositoryInterface(ABC):
    """
    Abstract interface for task repository.

    The list is shared: no operation is scoped by requester.
    """

    @abstractmethod
    async def append(self, description: str) -> Task:
        """Store a new pending task and return it."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Task]:
        """List all tasks in insertion order."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class InMemoryTaskRepository(TaskRepositoryInterface):
    """
    Process-local task store.

    Ids come from a per-store counter starting at 1, so two tasks created in
    the same instant still get distinct, increasing ids.
    """

    def __init__(self):
        self._tasks: List[Task] = []
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def append(self, description: str) -> Task:
        if not description or not description.strip():
            raise ValidationError("Task description is required")
        async with self._lock:
            task = Task(id=next(self._ids), description=description, status=TaskStatus.PENDING)
            self._tasks.append(task)
        return task

    async def list_all(self) -> List[Task]:
        return list(self._tasks)

    async def count(self) -> int:
        return len(self._tasks)
