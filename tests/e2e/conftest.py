"""Fixtures for end-to-end API tests.

The app runs on the test container, so every request in a test shares
the same in-memory repositories, which the ``world`` fixture seeds.
"""

import asyncio
from dataclasses import dataclass

import pytest
from dishka import AsyncContainer
from fastapi.testclient import TestClient

from qna.config import AuthSettings
from qna.domain.model import Profile
from qna.domain.repository import ProfileRepository, TagRepository
from qna.interface.api.app import create_app
from qna.util.jwt import create_token
from tests.conftest import make_profile, make_tag
from tests.di import build_test_container


@dataclass
class World:
    """Seeded users with their session cookies."""

    alice: Profile
    bob: Profile
    admin: Profile
    cookies: dict[str, dict[str, str]]

    def as_user(self, profile: Profile) -> dict[str, str]:
        return self.cookies[profile.username.root]


async def _seed(container: AsyncContainer) -> World:
    profile_repo = await container.get(ProfileRepository)
    tag_repo = await container.get(TagRepository)
    auth_settings = await container.get(AuthSettings)

    for name in ("python", "asyncio", "django"):
        await tag_repo.save(make_tag(name))

    alice = await profile_repo.save(make_profile("alice"))
    bob = await profile_repo.save(make_profile("bob"))
    admin = await profile_repo.save(make_profile("moderator", is_admin=True))

    cookies = {
        p.username.root: {
            auth_settings.cookie_name: create_token(
                str(p.id), p.username.root, auth_settings
            )
        }
        for p in (alice, bob, admin)
    }
    return World(alice=alice, bob=bob, admin=admin, cookies=cookies)


@pytest.fixture
def container() -> AsyncContainer:
    return build_test_container()


@pytest.fixture
def world(container) -> World:
    return asyncio.run(_seed(container))


@pytest.fixture
def client(container, world):
    """Test client on the seeded test container."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def ask(client, world):
    """Ask a question as alice and return its id."""

    def _ask(
        title: str = "How do I cancel an asyncio task cleanly?",
        content: str = "My task keeps running after I call cancel() and I cannot tell why.",
        tag_names: list[str] | None = None,
    ) -> str:
        response = client.post(
            "/questions",
            json={
                "title": title,
                "content": content,
                "tag_names": tag_names or ["python", "asyncio"],
            },
            cookies=world.as_user(world.alice),
        )
        assert response.status_code == 201, response.text
        return response.json()["question_id"]

    return _ask
