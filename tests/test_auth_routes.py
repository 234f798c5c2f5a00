"""
HTTP tests for /auth/register, /auth/login and /auth/me.
"""

import uuid

import pytest
from sqlalchemy import delete

from auth.dependencies import NO_TOKEN_MESSAGE
from auth.jwt import INVALID_TOKEN_MESSAGE, create_token
from database.models import User


class TestRegisterRoute:
    @pytest.mark.asyncio
    async def test_register_then_me(self, client, ash):
        resp = await client.post("/auth/register", json=ash)
        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Registration successful"
        assert body["user"]["email"] == "ash@pokemon.com"
        assert body["user"]["pseudo"] == "Sacha"
        assert "password" not in body["user"]

        me = await client.get("/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
        assert me.status_code == 200
        profile = me.json()
        assert profile["email"] == "ash@pokemon.com"
        assert profile["pseudo"] == "Sacha"
        assert profile["id"] == body["user"]["id"]
        assert not any("password" in key for key in profile)

    @pytest.mark.asyncio
    async def test_missing_field(self, client):
        resp = await client.post("/auth/register", json={"email": "ash@pokemon.com", "password": "pikachu123"})
        assert resp.status_code == 400
        assert "required" in resp.json()["message"]

    @pytest.mark.asyncio
    async def test_duplicate_email(self, client, ash):
        await client.post("/auth/register", json={**ash, "email": "Test@x.com"})
        resp = await client.post("/auth/register", json={**ash, "email": "test@x.com "})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Email already in use"

    @pytest.mark.asyncio
    async def test_malformed_body(self, client):
        resp = await client.post("/auth/register", content=b"{not json", headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert resp.json()["message"]

    @pytest.mark.asyncio
    async def test_overlong_password(self, client, ash):
        resp = await client.post("/auth/register", json={**ash, "password": "p" * 100})
        assert resp.status_code == 400
        assert "72 bytes" in resp.json()["message"]

    @pytest.mark.asyncio
    async def test_whitespace_password(self, client, ash):
        creds = {**ash, "password": " " * 8}
        assert (await client.post("/auth/register", json=creds)).status_code == 201
        resp = await client.post("/auth/login", json={"email": creds["email"], "password": creds["password"]})
        assert resp.status_code == 200


class TestLoginRoute:
    @pytest.mark.asyncio
    async def test_login(self, client, token, ash):
        resp = await client.post("/auth/login", json={"email": ash["email"], "password": ash["password"]})
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Login successful"
        assert body["token"]
        assert body["user"]["pseudo"] == "Sacha"

    @pytest.mark.asyncio
    async def test_wrong_password_same_as_unknown_email(self, client, token, ash):
        wrong = await client.post("/auth/login", json={"email": ash["email"], "password": "raichu456"})
        unknown = await client.post("/auth/login", json={"email": "misty@pokemon.com", "password": "pikachu123"})
        assert wrong.status_code == unknown.status_code == 401
        assert wrong.json() == unknown.json()

    @pytest.mark.asyncio
    async def test_missing_fields(self, client, ash):
        resp = await client.post("/auth/login", json={"email": ash["email"]})
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_overlong_password_same_as_wrong_password(self, client, token, ash):
        wrong = await client.post("/auth/login", json={"email": ash["email"], "password": "raichu456"})
        overlong = await client.post("/auth/login", json={"email": ash["email"], "password": "p" * 100})
        assert overlong.status_code == wrong.status_code == 401
        assert overlong.json() == wrong.json()


class TestMeRoute:
    @pytest.mark.asyncio
    async def test_no_header(self, client):
        resp = await client.get("/auth/me")
        assert resp.status_code == 401
        assert resp.json()["message"] == NO_TOKEN_MESSAGE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", ["Token abc", "bearer abc", "Bearer"])
    async def test_malformed_header(self, client, header):
        resp = await client.get("/auth/me", headers={"Authorization": header})
        assert resp.status_code == 401
        assert resp.json()["message"] == NO_TOKEN_MESSAGE

    @pytest.mark.asyncio
    async def test_garbage_token(self, client):
        resp = await client.get("/auth/me", headers={"Authorization": "Bearer garbage"})
        assert resp.status_code == 401
        assert resp.json()["message"] == INVALID_TOKEN_MESSAGE

    @pytest.mark.asyncio
    async def test_deleted_user(self, client, session_factory, auth_headers):
        async with session_factory() as s:
            await s.execute(delete(User))
            await s.commit()
        resp = await client.get("/auth/me", headers=auth_headers)
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_never_existing_user(self, client):
        token = create_token(str(uuid.uuid4()), "ghost@pokemon.com")
        resp = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 404
