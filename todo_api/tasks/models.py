"""
Todo Auth API - Task Models

Internal task model held by the task store.
"""

from dataclasses import dataclass

from todo_api.tasks.enums import TaskStatus


@dataclass(frozen=True)
class Task:
    """Task entity. Immutable once stored."""

    id: int
    description: str
    status: TaskStatus = TaskStatus.PENDING
