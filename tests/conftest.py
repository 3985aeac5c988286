"""Shared test fixtures."""

from __future__ import annotations

import os
import tempfile
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from motohub.auth.jwt import reset_keys
from motohub.config import get_settings
from motohub.database import close_db, create_tables, init_db
from motohub.main import create_app

TEST_PASSWORD = "ride-safe-123"


def _ensure_test_keys() -> tuple[str, str]:
    """Generate an RSA key pair for signing test tokens."""
    tmpdir = Path(tempfile.mkdtemp(prefix="motohub_test_keys_"))
    private_path = tmpdir / "jwt_private.pem"
    public_path = tmpdir / "jwt_public.pem"

    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_path.write_bytes(
        key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    public_path.write_bytes(
        key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    )

    os.environ["MOTOHUB_JWT_PRIVATE_KEY_PATH"] = str(private_path)
    os.environ["MOTOHUB_JWT_PUBLIC_KEY_PATH"] = str(public_path)
    os.environ["MOTOHUB_LOG_FORMAT"] = "console"

    # Clear cached settings and JWT keys
    get_settings.cache_clear()
    reset_keys()

    return str(private_path), str(public_path)


_ensure_test_keys()


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest_asyncio.fixture
async def client(app: FastAPI, tmp_path: Path) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against a fresh app and an empty SQLite database.

    Redis is never initialised here, so the rate limiter is a pass-through.
    """
    await init_db(f"sqlite+aiosqlite:///{tmp_path / 'motohub.db'}")
    await create_tables()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await close_db()


async def _register(client: AsyncClient, name: str, email: str) -> dict:
    """Register through the API and resolve the new user's id."""
    response = await client.post(
        "/api/users",
        json={"name": name, "email": email, "password": TEST_PASSWORD},
    )
    assert response.status_code == 200, response.text
    token = response.json()["access_token"]
    headers = {"Authorization": f"Bearer {token}"}
    me = await client.get("/api/auth", headers=headers)
    return {
        "id": me.json()["id"],
        "name": name,
        "email": email,
        "access_token": token,
        "headers": headers,
    }


@pytest_asyncio.fixture
async def alice(client: AsyncClient) -> dict:
    """A registered user. Returns id, credentials and auth headers."""
    return await _register(client, "Alice Rider", "alice@example.com")


@pytest_asyncio.fixture
async def bob(client: AsyncClient) -> dict:
    """A second registered user."""
    return await _register(client, "Bob Biker", "bob@example.com")
