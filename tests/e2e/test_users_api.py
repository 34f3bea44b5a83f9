"""End-to-end tests for auth, profile and message endpoints."""

from uuid import uuid4


class TestAuthEndpoints:
    """End-to-end tests for session status."""

    def test_me_anonymous(self, client):
        # Act
        response = client.get("/auth/me")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_me_authenticated(self, client, world):
        # Act
        response = client.get("/auth/me", cookies=world.as_user(world.alice))

        # Assert
        data = response.json()
        assert data["authenticated"] is True
        assert data["user"]["username"] == "alice"

    def test_logout_clears_cookie(self, client):
        # Act
        response = client.post("/auth/logout")

        # Assert
        assert response.status_code == 200
        assert "auth_token" in response.headers.get("set-cookie", "")

    def test_health(self, client):
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        assert response.json()["environment"] == "test"


class TestProfileEndpoints:
    """End-to-end tests for user profile API endpoints."""

    def test_get_profile(self, client, world, ask):
        # Arrange
        question_id = ask()

        # Act
        response = client.get("/users/alice")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["profile"]["user_id"] == str(world.alice.id)
        assert [q["question_id"] for q in data["questions"]] == [question_id]

    def test_get_nonexistent_profile(self, client):
        # Act
        response = client.get("/users/nobody-here")

        # Assert
        assert response.status_code == 404

    def test_update_profile_without_auth_fails(self, client):
        # Act
        response = client.patch("/users/me", json={"bio": "This should fail"})

        # Assert
        assert response.status_code == 401

    def test_update_profile_username_taken(self, client, world):
        # Act
        response = client.patch(
            "/users/me",
            json={"username": "bob"},
            cookies=world.as_user(world.alice),
        )

        # Assert
        assert response.status_code == 400
        assert "already taken" in response.json()["detail"]

    def test_update_profile_bio(self, client, world):
        # Act
        response = client.patch(
            "/users/me",
            json={"bio": "Async enthusiast"},
            cookies=world.as_user(world.alice),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["profile"]["bio"] == "Async enthusiast"

    def test_list_users(self, client):
        # Act
        response = client.get("/users")

        # Assert
        assert {p["username"] for p in response.json()["profiles"]} == {
            "alice",
            "bob",
            "moderator",
        }


class TestMessageEndpoints:
    """End-to-end tests for direct messages."""

    def test_conversation_between_two_users(self, client, world):
        # Arrange
        client.post(
            f"/messages/{world.bob.id}",
            json={"content": "Thanks for the answer!"},
            cookies=world.as_user(world.alice),
        )

        # Act
        response = client.get(
            f"/messages/{world.alice.id}", cookies=world.as_user(world.bob)
        )

        # Assert
        assert response.status_code == 200
        messages = response.json()["messages"]
        assert [m["content"] for m in messages] == ["Thanks for the answer!"]

    def test_message_to_self_is_rejected(self, client, world):
        # Act
        response = client.post(
            f"/messages/{world.alice.id}",
            json={"content": "Note to self"},
            cookies=world.as_user(world.alice),
        )

        # Assert
        assert response.status_code == 400

    def test_message_to_unknown_user(self, client, world):
        # Act
        response = client.post(
            f"/messages/{uuid4()}",
            json={"content": "Hello?"},
            cookies=world.as_user(world.alice),
        )

        # Assert
        assert response.status_code == 404


class TestAdminEndpoints:
    """End-to-end tests for the admin area."""

    def test_regular_user_is_forbidden(self, client, world):
        # Act
        response = client.get("/admin/users", cookies=world.as_user(world.alice))

        # Assert
        assert response.status_code == 403

    def test_grant_admin_and_delete_user(self, client, world):
        # Arrange
        admin = world.as_user(world.admin)

        # Act
        granted = client.post(f"/admin/users/{world.alice.id}/admin", cookies=admin)
        deleted = client.delete(f"/admin/users/{world.bob.id}", cookies=admin)

        # Assert
        assert granted.json()["profile"]["is_admin"] is True
        assert deleted.status_code == 204
        assert client.get("/users/bob").status_code == 404

    def test_deleting_answerer_clears_best_answer(self, client, world, ask):
        # Arrange
        admin = world.as_user(world.admin)
        bob = world.as_user(world.bob)
        question_id = ask()
        answer_id = client.post(
            f"/questions/{question_id}/answers",
            json={"content": "Await the task after cancelling it."},
            cookies=bob,
        ).json()["answer"]["answer_id"]
        client.post(
            f"/questions/{question_id}/best-answer",
            json={"answer_id": answer_id},
            cookies=world.as_user(world.alice),
        )
        client.post(f"/questions/{question_id}/vote", json={"direction": 1}, cookies=bob)
        before = client.get("/users/bob").json()["profile"]

        # Act
        deleted = client.delete(f"/admin/users/{world.bob.id}", cookies=admin)

        # Assert
        assert before["best_answer_count"] == 1
        assert deleted.status_code == 204
        detail = client.get(f"/questions/{question_id}").json()
        assert detail["answers"] == []
        assert detail["question"]["has_best_answer"] is False
        assert detail["question"]["answer_count"] == 0
        assert detail["question"]["votes"] == 0

    def test_deleted_users_session_cannot_write(self, client, world, ask):
        # Arrange
        question_id = ask()
        bob = world.as_user(world.bob)
        client.delete(f"/admin/users/{world.bob.id}", cookies=world.as_user(world.admin))

        # Act
        answered = client.post(
            f"/questions/{question_id}/answers",
            json={"content": "Posting from a stale session."},
            cookies=bob,
        )
        voted = client.post(
            f"/questions/{question_id}/vote", json={"direction": 1}, cookies=bob
        )

        # Assert
        assert answered.status_code == 401
        assert voted.status_code == 401
        detail = client.get(f"/questions/{question_id}").json()
        assert detail["question"]["answer_count"] == 0
        assert detail["question"]["votes"] == 0

    def test_moderate_messages(self, client, world):
        # Arrange
        admin = world.as_user(world.admin)
        message_id = client.post(
            f"/messages/{world.bob.id}",
            json={"content": "Buy cheap watches"},
            cookies=world.as_user(world.alice),
        ).json()["message"]["message_id"]

        # Act
        listed = client.get("/admin/messages", cookies=admin)
        deleted = client.delete(f"/admin/messages/{message_id}", cookies=admin)

        # Assert
        assert [m["message_id"] for m in listed.json()["messages"]] == [message_id]
        assert deleted.status_code == 204
        assert client.get("/admin/messages", cookies=admin).json()["messages"] == []

    def test_reconcile_question(self, client, world, ask):
        # Arrange
        question_id = ask()
        client.post(
            f"/questions/{question_id}/vote",
            json={"direction": 1},
            cookies=world.as_user(world.bob),
        )

        # Act
        response = client.post(
            f"/admin/questions/{question_id}/reconcile",
            cookies=world.as_user(world.admin),
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["question_votes"] == 1
        assert data["drift"] == []
