"""End-to-end tests through the HTTP API."""

import pytest
from httpx import ASGITransport, AsyncClient

from booknotes.api.dependencies.database import get_db
from booknotes.api.main import app


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


async def register(client, name: str, password: str = "secret123") -> dict:
    response = await client.post(
        "/api/auth/register",
        json={"email": f"{name.lower()}@example.com", "password": password, "name": name},
    )
    assert response.status_code == 201, response.text
    body = response.json()
    return {
        "id": body["user"]["id"],
        "headers": {"Authorization": f"Bearer {body['access_token']}"},
    }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTH
# ═══════════════════════════════════════════════════════════════════════════════


async def test_register_login_and_me(client):
    response = await client.post(
        "/api/auth/register",
        json={"email": "Ann@Example.com", "password": "secret123", "name": "Ann"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "ann@example.com"
    assert body["token_type"] == "bearer"
    assert body["expires_in"] > 0

    response = await client.post(
        "/api/auth/login",
        json={"email": "ann@example.com", "password": "secret123"},
    )
    assert response.status_code == 200
    token = response.json()["access_token"]

    response = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["name"] == "Ann"


async def test_register_short_password_is_validation_error(client):
    response = await client.post(
        "/api/auth/register",
        json={"email": "ann@example.com", "password": "123"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_register_duplicate_email_conflicts(client):
    await register(client, "Ann")

    response = await client.post(
        "/api/auth/register",
        json={"email": "ANN@example.com", "password": "secret123"},
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


async def test_login_wrong_password(client):
    await register(client, "Ann")

    response = await client.post(
        "/api/auth/login",
        json={"email": "ann@example.com", "password": "wrong-password"},
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


@pytest.mark.parametrize(
    "headers",
    [{}, {"Authorization": "Bearer not-a-token"}],
    ids=["missing", "garbage"],
)
async def test_protected_route_requires_token(client, headers):
    response = await client.get("/api/auth/me", headers=headers)

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


async def test_update_profile_and_delete_account(client):
    ann = await register(client, "Ann")

    response = await client.patch(
        "/api/users/me",
        json={"name": "Annie", "avatar_url": "/uploads/annie.png"},
        headers=ann["headers"],
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Annie"
    assert response.json()["avatar_url"] == "/uploads/annie.png"

    response = await client.delete("/api/users/me", headers=ann["headers"])
    assert response.status_code == 204

    response = await client.get("/api/auth/me", headers=ann["headers"])
    assert response.status_code == 401


# ═══════════════════════════════════════════════════════════════════════════════
# BOOKS
# ═══════════════════════════════════════════════════════════════════════════════


async def test_book_lifecycle(client):
    author = await register(client, "Author")

    response = await client.post(
        "/api/books",
        json={"title": "Deep Work", "content": "Focus.", "genres": "productivity, focus"},
        headers=author["headers"],
    )
    assert response.status_code == 201
    book = response.json()
    assert book["genres"] == ["productivity", "focus"]
    assert book["author_name"] == "Author"

    response = await client.get("/api/books", params={"genre": "FOCUS"})
    assert [b["id"] for b in response.json()] == [book["id"]]

    response = await client.get("/api/genres")
    assert response.json() == ["focus", "productivity"]

    response = await client.patch(
        f"/api/books/{book['id']}",
        json={"title": "Deep Work (2nd ed.)"},
        headers=author["headers"],
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Deep Work (2nd ed.)"
    assert response.json()["content"] == "Focus."

    response = await client.delete(f"/api/books/{book['id']}", headers=author["headers"])
    assert response.status_code == 204

    response = await client.get(f"/api/books/{book['id']}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


async def test_create_book_requires_auth(client):
    response = await client.post("/api/books", json={"title": "T", "content": "C"})

    assert response.status_code == 401


async def test_create_book_blank_title(client):
    author = await register(client, "Author")

    response = await client.post(
        "/api/books",
        json={"title": "   ", "content": "C"},
        headers=author["headers"],
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_only_author_may_modify_book(client):
    author = await register(client, "Author")
    intruder = await register(client, "Intruder")
    response = await client.post(
        "/api/books",
        json={"title": "Mine", "content": "C"},
        headers=author["headers"],
    )
    book_id = response.json()["id"]

    response = await client.patch(
        f"/api/books/{book_id}",
        json={"title": "Theirs"},
        headers=intruder["headers"],
    )
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "AUTHORIZATION_ERROR"

    response = await client.delete(f"/api/books/{book_id}", headers=intruder["headers"])
    assert response.status_code == 403


async def test_malformed_book_id_is_validation_error(client):
    response = await client.get("/api/books/not-a-uuid")

    assert response.status_code == 400


# ═══════════════════════════════════════════════════════════════════════════════
# SOCIAL
# ═══════════════════════════════════════════════════════════════════════════════


async def test_like_comment_and_inbox_flow(client):
    author = await register(client, "Author")
    reader = await register(client, "Reader")
    response = await client.post(
        "/api/books",
        json={"title": "Sapiens", "content": "Humans."},
        headers=author["headers"],
    )
    book_id = response.json()["id"]

    response = await client.post(f"/api/books/{book_id}/like", headers=reader["headers"])
    assert response.json() == {"liked": True, "like_count": 1}

    response = await client.post(
        f"/api/books/{book_id}/comments",
        json={"content": "  Loved it  "},
        headers=reader["headers"],
    )
    assert response.status_code == 201
    root = response.json()
    assert root["content"] == "Loved it"
    assert root["children"] == []

    response = await client.post(
        f"/api/books/{book_id}/comments",
        json={"content": "Thanks!", "parent_id": root["id"]},
        headers=author["headers"],
    )
    assert response.status_code == 201

    response = await client.get(f"/api/books/{book_id}/comments")
    threads = response.json()
    assert len(threads) == 1
    assert threads[0]["children"][0]["content"] == "Thanks!"
    assert threads[0]["children"][0]["author_name"] == "Author"

    response = await client.get("/api/books")
    (summary,) = response.json()
    assert summary["like_count"] == 1
    assert summary["comment_count"] == 2

    # Author: one like and one root comment
    response = await client.get("/api/notifications", headers=author["headers"])
    assert sorted(n["type"] for n in response.json()) == ["like", "reply"]
    assert all(n["actor_name"] == "Reader" for n in response.json())
    assert all(n["book_title"] == "Sapiens" for n in response.json())

    # Reader: the author's reply
    response = await client.get("/api/notifications/unread-count", headers=reader["headers"])
    assert response.json() == {"count": 1}
    response = await client.get("/api/notifications", headers=reader["headers"])
    (reply,) = response.json()

    response = await client.patch(
        f"/api/notifications/{reply['id']}/read", headers=author["headers"]
    )
    assert response.json()["updated"] == 0

    response = await client.patch(
        f"/api/notifications/{reply['id']}/read", headers=reader["headers"]
    )
    assert response.json()["updated"] == 1

    response = await client.patch("/api/notifications/read-all", headers=author["headers"])
    assert response.json()["updated"] == 2

    response = await client.get(
        "/api/notifications", params={"unread": "true"}, headers=author["headers"]
    )
    assert response.json() == []

    response = await client.post(f"/api/books/{book_id}/like", headers=reader["headers"])
    assert response.json() == {"liked": False, "like_count": 0}


async def test_comment_with_blank_content(client):
    author = await register(client, "Author")
    response = await client.post(
        "/api/books",
        json={"title": "Sapiens", "content": "Humans."},
        headers=author["headers"],
    )
    book_id = response.json()["id"]

    response = await client.post(
        f"/api/books/{book_id}/comments",
        json={"content": "   "},
        headers=author["headers"],
    )

    assert response.status_code == 400


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH
# ═══════════════════════════════════════════════════════════════════════════════


async def test_health_endpoints(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"

    response = await client.get("/ready")
    assert response.json() == {"status": "ready"}

    response = await client.get("/live")
    assert response.json() == {"status": "alive"}


async def test_public_profile_hides_private_fields(client):
    ann = await register(client, "Ann")

    response = await client.get(f"/api/users/{ann['id']}")

    assert response.status_code == 200
    assert response.json()["name"] == "Ann"
    assert "email" not in response.json()


async def test_public_profile_unknown_user(client):
    response = await client.get("/api/users/00000000-0000-0000-0000-000000000000")

    assert response.status_code == 404


async def test_request_id_is_echoed(client):
    response = await client.get("/live", headers={"X-Request-ID": "req-42"})
    assert response.headers["X-Request-ID"] == "req-42"

    response = await client.get("/live")
    assert response.headers["X-Request-ID"]
