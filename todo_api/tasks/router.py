"""
Todo Auth API - Task Router

Endpoints for the shared task list. All endpoints are JWT-protected.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from todo_api.auth.dependencies import CurrentClaims
from todo_api.state import AppState, get_app_state
from todo_api.tasks.repository import TaskRepositoryInterface
from todo_api.tasks.schemas import TaskCreateRequest, TaskResponse
from todo_api.tasks.service import TaskService


router = APIRouter(prefix="/todos", tags=["Tasks"])


def get_task_repository(
    state: Annotated[AppState, Depends(get_app_state)]
) -> TaskRepositoryInterface:
    """Dependency to get task repository instance."""
    return state.tasks


def get_task_service(
    repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)]
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(repository)


@router.get(
    "",
    response_model=List[TaskResponse],
    summary="List all tasks",
)
async def list_tasks(
    claims: CurrentClaims,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> List[TaskResponse]:
    """Return every task in creation order. The list is shared by all users."""
    return await service.list_tasks()


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    request: TaskCreateRequest,
    claims: CurrentClaims,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """Append a task to the shared list. New tasks start as `pending`."""
    return await service.create_task(request.task, claims)
