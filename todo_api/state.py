"""
Todo Auth API - Application State

Owns the process-local stores and the auth primitives. One AppState is
attached to each application instance; handlers reach it via dependencies.
"""

import logging
from dataclasses import dataclass, field

from fastapi import Request

from todo_api.auth.hashing import PasswordHasher
from todo_api.auth.repository import InMemoryUserRepository, UserRepositoryInterface
from todo_api.auth.tokens import TokenService
from todo_api.tasks.repository import InMemoryTaskRepository, TaskRepositoryInterface

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Mutable service state shared by all requests of one app."""

    users: UserRepositoryInterface = field(default_factory=InMemoryUserRepository)
    tasks: TaskRepositoryInterface = field(default_factory=InMemoryTaskRepository)
    hasher: PasswordHasher = field(default_factory=PasswordHasher)
    tokens: TokenService = field(default_factory=TokenService)

    async def log_summary(self) -> None:
        users = await self.users.count()
        tasks = await self.tasks.count()
        logger.info(f"In-memory state discarded: users={users}, tasks={tasks}")


def get_app_state(request: Request) -> AppState:
    """Dependency to get the AppState of the running application."""
    return request.app.state.services
