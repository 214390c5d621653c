"""
Todo Auth API - In-Memory Store Tests

Credential store and task store behaviour, independent of HTTP.
"""

import asyncio

import pytest

from todo_api.auth.models import User
from todo_api.auth.repository import InMemoryUserRepository
from todo_api.errors import ValidationError
from todo_api.tasks.enums import TaskStatus
from todo_api.tasks.repository import InMemoryTaskRepository


class TestInMemoryUserRepository:

    @pytest.mark.asyncio
    async def test_create_and_find(self):
        repo = InMemoryUserRepository()
        user = await repo.create(User.create("alice", "$2b$04$hash"))
        assert await repo.get_by_username("alice") is user
        assert await repo.exists_by_username("alice")

    @pytest.mark.asyncio
    async def test_lookup_is_case_sensitive(self):
        repo = InMemoryUserRepository()
        await repo.create(User.create("alice", "$2b$04$hash"))
        assert await repo.get_by_username("Alice") is None
        assert not await repo.exists_by_username("ALICE")

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        repo = InMemoryUserRepository()
        assert await repo.get_by_username("nobody") is None

    @pytest.mark.asyncio
    async def test_duplicates_are_stored_first_match_wins(self):
        """The store itself does not enforce unique usernames."""
        repo = InMemoryUserRepository()
        first = await repo.create(User.create("alice", "$2b$04$first"))
        await repo.create(User.create("alice", "$2b$04$second"))
        assert await repo.count() == 2
        assert await repo.get_by_username("alice") is first

    @pytest.mark.asyncio
    async def test_create_if_absent_refuses_existing_username(self):
        repo = InMemoryUserRepository()
        first = await repo.create_if_absent(User.create("alice", "$2b$04$first"))
        assert first is not None
        assert await repo.create_if_absent(User.create("alice", "$2b$04$second")) is None
        assert await repo.get_by_username("alice") is first
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_create_if_absent_concurrent_single_winner(self):
        repo = InMemoryUserRepository()
        results = await asyncio.gather(
            *(repo.create_if_absent(User.create("alice", f"$2b$04$hash{i}")) for i in range(10))
        )
        assert sum(r is not None for r in results) == 1
        assert await repo.count() == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username, password_hash", [("", "$2b$04$hash"), ("alice", "")])
    async def test_empty_fields_rejected(self, username, password_hash):
        repo = InMemoryUserRepository()
        with pytest.raises(ValidationError):
            await repo.create(User.create(username, password_hash))
        assert await repo.count() == 0


class TestInMemoryTaskRepository:

    @pytest.mark.asyncio
    async def test_append_returns_pending_task(self):
        repo = InMemoryTaskRepository()
        task = await repo.append("buy milk")
        assert task.description == "buy milk"
        assert task.status == TaskStatus.PENDING
        assert task.id == 1

    @pytest.mark.asyncio
    async def test_list_in_insertion_order(self):
        repo = InMemoryTaskRepository()
        for description in ("one", "two", "three"):
            await repo.append(description)
        tasks = await repo.list_all()
        assert [t.description for t in tasks] == ["one", "two", "three"]

    @pytest.mark.asyncio
    async def test_ids_are_unique_and_increasing(self):
        repo = InMemoryTaskRepository()
        tasks = await asyncio.gather(*(repo.append(f"task {i}") for i in range(50)))
        ids = [t.id for t in tasks]
        assert len(set(ids)) == 50
        listed = [t.id for t in await repo.list_all()]
        assert listed == sorted(listed)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("description", ["", "   "])
    async def test_empty_description_rejected(self, description):
        repo = InMemoryTaskRepository()
        with pytest.raises(ValidationError):
            await repo.append(description)
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_list_is_a_snapshot(self):
        repo = InMemoryTaskRepository()
        await repo.append("first")
        snapshot = await repo.list_all()
        await repo.append("second")
        assert len(snapshot) == 1
        assert await repo.count() == 2

    @pytest.mark.asyncio
    async def test_separate_stores_are_isolated(self):
        a, b = InMemoryTaskRepository(), InMemoryTaskRepository()
        await a.append("only in a")
        assert await b.list_all() == []
        assert (await b.append("first in b")).id == 1
