"""
Shared fixtures: an in-memory SQLite database per test and an in-process
HTTP client bound to a fresh app.
"""

import copy
import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from database.session import get_db_session, init_models
from main import create_app

ASH = {"email": "ash@pokemon.com", "password": "pikachu123", "pseudo": "Sacha"}

BULBASAUR = {
    "id": 1,
    "name": {
        "english": "Bulbasaur",
        "japanese": "フシギダネ",
        "chinese": "妙蛙种子",
        "french": "Bulbizarre",
    },
    "type": ["Grass", "Poison"],
    "base": {
        "HP": 45,
        "Attack": 49,
        "Defense": 49,
        "SpecialAttack": 65,
        "SpecialDefense": 65,
        "Speed": 45,
    },
    "image": "https://example.com/1.png",
}


def make_pokemon(pokemon_id: int, french: str, types: list[str]) -> dict:
    data = {**copy.deepcopy(BULBASAUR), "id": pokemon_id, "type": types}
    data["name"] = {**BULBASAUR["name"], "english": french, "french": french}
    return data


@pytest_asyncio.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest.fixture
def app(session_factory):
    application = create_app()

    async def _session():
        async with session_factory() as s:
            try:
                yield s
                await s.commit()
            except Exception:
                await s.rollback()
                raise

    application.dependency_overrides[get_db_session] = _session
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def token(client):
    resp = await client.post("/auth/register", json=ASH)
    assert resp.status_code == 201
    return resp.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def ash():
    return dict(ASH)


@pytest.fixture
def bulbasaur():
    return make_pokemon(1, "Bulbizarre", ["Grass", "Poison"])


@pytest.fixture
def pokemon_factory():
    return make_pokemon
