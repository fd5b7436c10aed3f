import pytest

from tests.conftest import auth_header


REGISTRATION = {"name": "Sam", "email": "Sam@Example.com", "password": "password123"}


@pytest.mark.integration
class TestRegisterAndLogin:

    async def test_register(self, client):
        response = await client.post("/users", json=REGISTRATION)

        assert response.status_code == 201
        body = response.json()
        assert body["errors"] is None
        assert body["data"]["email"] == "sam@example.com"
        assert body["data"]["role"] == "buyer"
        assert "password" not in body["data"]
        assert "password_hash" not in body["data"]

    async def test_register_duplicate(self, client):
        await client.post("/users", json=REGISTRATION)

        response = await client.post("/users", json={**REGISTRATION, "email": "sam@example.com"})

        assert response.status_code == 409

    async def test_register_short_password(self, client):
        response = await client.post("/users", json={**REGISTRATION, "password": "short"})

        assert response.status_code == 400
        assert response.json()["errors"]["code"] == "VALIDATION_ERROR"

    async def test_login_then_profile(self, client):
        await client.post("/users", json=REGISTRATION)

        login = await client.post("/users/login", json={"email": "sam@example.com", "password": "password123"})
        token = login.json()["data"]["access_token"]
        profile = await client.get("/users", headers={"Authorization": f"Bearer {token}"})

        assert login.status_code == 200
        assert login.json()["data"]["token_type"] == "bearer"
        assert profile.status_code == 200
        assert profile.json()["data"]["name"] == "Sam"

    async def test_login_bad_password(self, client):
        await client.post("/users", json=REGISTRATION)

        response = await client.post("/users/login", json={"email": "sam@example.com", "password": "wrongpass"})

        assert response.status_code == 401
        assert response.json()["errors"]["code"] == "AUTHENTICATION_ERROR"

    async def test_refresh(self, client):
        await client.post("/users", json=REGISTRATION)
        login = await client.post("/users/login", json={"email": "sam@example.com", "password": "password123"})

        response = await client.post(
            "/users/refresh", json={"refresh_token": login.json()["data"]["refresh_token"]}
        )

        assert response.status_code == 200
        assert response.json()["data"]["access_token"]


@pytest.mark.integration
class TestProfileAuth:

    async def test_profile_requires_token(self, client):
        response = await client.get("/users")

        assert response.status_code == 401

    async def test_profile_rejects_garbage_token(self, client):
        response = await client.get("/users", headers={"Authorization": "Bearer nonsense"})

        assert response.status_code == 401

    async def test_update_profile(self, client, buyer_user):
        response = await client.put("/users", json={"name": "Renamed"}, headers=auth_header(buyer_user))

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Renamed"


@pytest.mark.integration
class TestPasswordResetApi:

    async def test_forgot_and_reset(self, client, email_sender):
        await client.post("/users", json=REGISTRATION)

        forgot = await client.post("/users/forgot-password", json={"email": "sam@example.com"})
        _, token = email_sender.sent[-1]
        reset = await client.post("/users/reset-password", json={"token": token, "new_password": "freshpass1"})
        login = await client.post("/users/login", json={"email": "sam@example.com", "password": "freshpass1"})

        assert forgot.status_code == 200
        assert reset.status_code == 200
        assert login.status_code == 200

    async def test_forgot_unknown_email_looks_the_same(self, client, email_sender):
        response = await client.post("/users/forgot-password", json={"email": "nobody@example.com"})

        assert response.status_code == 200
        assert email_sender.sent == []
