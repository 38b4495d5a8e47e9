"""Test harness for unit and integration tests.

Unit environments run entirely on in-memory repositories. Integration
environments unmock persistence and run against a fresh SQLite file per
test, so no database server is needed.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from agora.persistence.database import create_schema
from agora.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Creates the schema when persistence is real
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence on SQLite
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_save_vote(integration_env):
            repo = await integration_env.get(VoteRepository)
            vote = await repo.save(Vote(...))
            assert vote.id is not None
    """
    unmock = unmock or set()

    @pytest_asyncio.fixture
    async def _test_environment(tmp_path, monkeypatch):
        if "persistence" in unmock:
            monkeypatch.setenv(
                "DATABASE__URL", f"sqlite+aiosqlite:///{tmp_path / 'agora.db'}"
            )

        container = build_test_container(unmock=unmock)
        try:
            if "persistence" in unmock:
                await create_schema(await container.get(AsyncEngine))

            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _test_environment
