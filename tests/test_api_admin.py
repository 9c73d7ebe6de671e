"""
Admin and health API tests
"""
from data.models import UserRole
from tests.conftest import auth
from utils.security import verify_password


def test_admin_routes_require_admin(client, make_user):
    brand = make_user(UserRole.BRAND)
    assert client.get("/api/v1/admin/users", headers=auth(brand)).status_code == 403
    assert client.get("/api/v1/admin/stats").status_code == 401


def test_list_users(client, make_user):
    admin = make_user(UserRole.ADMIN)
    make_user(UserRole.BRAND)
    all_users = client.get("/api/v1/admin/users", headers=auth(admin)).json()
    brands = client.get("/api/v1/admin/users", params={"role": "brand"}, headers=auth(admin)).json()
    assert len(all_users) == 2
    assert [u["role"] for u in brands] == ["brand"]


def test_update_user_and_verify(client, make_user):
    admin = make_user(UserRole.ADMIN)
    influencer = make_user()
    client.post(
        "/api/v1/profile/influencer",
        json={"category": "Travel", "platforms": ["Instagram"]},
        headers=auth(influencer)
    )

    response = client.put(
        f"/api/v1/admin/users/{influencer.id}",
        json={"name": "Verified Traveller", "verified": True},
        headers=auth(admin)
    )
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Verified Traveller"

    profile = client.get("/api/v1/profile/influencer", headers=auth(influencer)).json()
    assert profile["verified"] is True


def test_update_user_rejects_nulls_and_bad_formats(client, make_user):
    admin = make_user(UserRole.ADMIN)
    brand = make_user(UserRole.BRAND, username="acme")

    for payload in (
        {"username": None},
        {"email": None},
        {"name": None},
        {"username": "has space"},
        {"email": "not-an-email"},
    ):
        response = client.put(f"/api/v1/admin/users/{brand.id}", json=payload, headers=auth(admin))
        assert response.status_code == 422, payload

    listed = client.get("/api/v1/admin/users", headers=auth(admin))
    assert listed.status_code == 200
    assert "acme" in [u["username"] for u in listed.json()]


def test_update_user_password(client, services, make_user):
    admin = make_user(UserRole.ADMIN)
    target = make_user()

    response = client.put(
        f"/api/v1/admin/users/{target.id}",
        json={"password": "new-secret"},
        headers=auth(admin)
    )
    assert response.status_code == 200
    assert "password" not in response.json()["data"]

    stored = services.users.get_user(target.id)
    assert stored.password != "new-secret"
    assert verify_password("new-secret", stored.password)


def test_update_missing_user(client, make_user):
    admin = make_user(UserRole.ADMIN)
    response = client.put("/api/v1/admin/users/999", json={"name": "x"}, headers=auth(admin))
    assert response.status_code == 404


def test_delete_user_hides_conversation(client, make_user):
    admin, alice, bob = make_user(UserRole.ADMIN), make_user(), make_user(UserRole.BRAND)
    client.post("/api/v1/messages", json={"recipient_id": bob.id, "content": "hi"}, headers=auth(alice))

    assert client.delete(f"/api/v1/admin/users/{bob.id}", headers=auth(admin)).status_code == 200
    assert client.get("/api/v1/conversations", headers=auth(alice)).json() == []
    assert client.delete(f"/api/v1/admin/users/{bob.id}", headers=auth(admin)).status_code == 404


def test_stats(client, make_user):
    admin, alice, bob = make_user(UserRole.ADMIN), make_user(), make_user(UserRole.BRAND)
    client.post("/api/v1/messages", json={"recipient_id": bob.id, "content": "hi"}, headers=auth(alice))

    stats = client.get("/api/v1/admin/stats", headers=auth(admin)).json()
    assert stats["users"]["total"] == 3
    assert stats["messaging"] == {
        "total_messages": 1,
        "unread_messages": 1,
        "conversation_count": 1,
        "active_users": 2,
    }


def test_health(client, make_user):
    make_user()
    assert client.get("/api/v1/health").json()["status"] == "healthy"
    detailed = client.get("/api/v1/health/detailed").json()
    assert detailed["checks"]["store"]["details"]["collections"]["users"] == 1
    assert client.get("/").json()["status"] == "running"
