"""
Todo Auth API - Task Enums
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task status values. Tasks are created pending and no transition exists yet."""
    PENDING = "pending"
