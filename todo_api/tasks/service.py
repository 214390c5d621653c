"""
Todo Auth API - Task Service

Business logic for the shared task list.
"""

import logging
from typing import List

from todo_api.auth.models import TokenClaims
from todo_api.tasks.models import Task
from todo_api.tasks.repository import TaskRepositoryInterface
from todo_api.tasks.schemas import TaskResponse

logger = logging.getLogger(__name__)


class TaskService:
    """Service layer for task business logic."""

    def __init__(self, repository: TaskRepositoryInterface):
        self.repository = repository

    @staticmethod
    def _task_to_response(task: Task) -> TaskResponse:
        return TaskResponse(id=task.id, task=task.description, status=task.status)

    async def create_task(self, description: str, claims: TokenClaims) -> TaskResponse:
        task = await self.repository.append(description)
        logger.info(f"Task created: id={task.id}, by={claims.username}")
        return self._task_to_response(task)

    async def list_tasks(self) -> List[TaskResponse]:
        tasks = await self.repository.list_all()
        return [self._task_to_response(task) for task in tasks]
