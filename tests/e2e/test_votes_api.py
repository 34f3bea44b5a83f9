"""End-to-end tests for voting endpoints."""

import asyncio
from uuid import uuid4

from qna.domain.error import StoreFailureError
from qna.domain.repository import VoteRepository


class TestVoteEndpoints:
    """End-to-end tests for the vote ledger over HTTP."""

    def test_vote_requires_authentication(self, client, ask):
        # Arrange
        question_id = ask()

        # Act
        response = client.post(f"/questions/{question_id}/vote", json={"direction": 1})

        # Assert
        assert response.status_code == 401

    def test_invalid_direction_is_422(self, client, world, ask):
        # Arrange
        question_id = ask()

        # Act
        response = client.post(
            f"/questions/{question_id}/vote",
            json={"direction": 2},
            cookies=world.as_user(world.bob),
        )

        # Assert
        assert response.status_code == 422

    def test_vote_toggle_and_flip(self, client, world, ask):
        # Arrange
        question_id = ask()
        bob = world.as_user(world.bob)

        def vote(direction: int) -> dict:
            response = client.post(
                f"/questions/{question_id}/vote",
                json={"direction": direction},
                cookies=bob,
            )
            assert response.status_code == 200, response.text
            return response.json()

        # Act
        applied = vote(1)
        changed = vote(-1)
        toggled = vote(-1)

        # Assert
        assert (applied["outcome"], applied["delta"]) == ("applied", 1)
        assert (changed["outcome"], changed["delta"]) == ("changed", -2)
        assert (toggled["outcome"], toggled["delta"]) == ("toggled", 1)
        assert toggled["direction"] == 0
        question = client.get(f"/questions/{question_id}").json()["question"]
        assert question["votes"] == 0

    def test_displayed_score_projection(self, client, world, ask):
        # Arrange
        question_id = ask()

        # Act
        response = client.post(
            f"/questions/{question_id}/vote",
            json={"direction": 1, "displayed_score": 41},
            cookies=world.as_user(world.bob),
        )

        # Assert
        assert response.json()["projected_score"] == 42

    def test_answer_vote_and_my_vote(self, client, world, ask):
        # Arrange
        question_id = ask()
        answer_id = client.post(
            f"/questions/{question_id}/answers",
            json={"content": "Await the task after cancelling it."},
            cookies=world.as_user(world.bob),
        ).json()["answer"]["answer_id"]

        # Act
        client.post(
            f"/answers/{answer_id}/vote",
            json={"direction": 1},
            cookies=world.as_user(world.alice),
        )
        mine = client.get(
            f"/answers/{answer_id}/vote", cookies=world.as_user(world.alice)
        )
        anonymous = client.get(f"/answers/{answer_id}/vote")

        # Assert
        assert mine.json()["direction"] == 1
        assert anonymous.json()["direction"] == 0
        detail = client.get(
            f"/questions/{question_id}", cookies=world.as_user(world.alice)
        ).json()
        assert detail["answers"][0]["votes"] == 1
        assert detail["answers"][0]["user_vote"] == 1

    def test_vote_on_missing_answer_is_404(self, client, world):
        # Act
        response = client.post(
            f"/answers/{uuid4()}/vote",
            json={"direction": 1},
            cookies=world.as_user(world.bob),
        )

        # Assert
        assert response.status_code == 404

    def test_store_failure_is_503(self, client, container, world, ask, monkeypatch):
        """A failed ledger write never surfaces as a 500."""
        # Arrange
        question_id = ask()
        vote_repo = asyncio.run(container.get(VoteRepository))

        async def fail(*args, **kwargs):
            raise StoreFailureError("vote_repository.save", "connection reset")

        monkeypatch.setattr(vote_repo, "save", fail)

        # Act
        response = client.post(
            f"/questions/{question_id}/vote",
            json={"direction": 1},
            cookies=world.as_user(world.bob),
        )

        # Assert
        assert response.status_code == 503
        assert "connection reset" not in response.json()["detail"]
