"""
Todo Auth API - Task Schemas

Pydantic models for task API requests and responses.
"""

from pydantic import BaseModel, Field

from todo_api.tasks.enums import TaskStatus


class TaskCreateRequest(BaseModel):
    """Request model for creating a task."""

    task: str = Field(min_length=1, description="Task description")


class TaskResponse(BaseModel):
    """Response model for a single task."""

    id: int = Field(description="Task ID")
    task: str = Field(description="Task description")
    status: TaskStatus = Field(description="Task status")
