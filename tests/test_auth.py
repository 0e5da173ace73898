"""
Tests for email/password authentication.

This test suite validates:
1. Signup stores a hashed password and requires email confirmation
2. Confirmation links are one-time use and sign the user in
3. Login rejects bad credentials and unconfirmed accounts
4. Account lockout after repeated failed logins
5. Session cookies are signed
"""
from datetime import datetime, timedelta

import jwt
import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from youthconnect.models.user import User
from youthconnect.services.security import (
    create_session_token,
    hash_password,
    read_session_token,
    verify_password,
)

from conftest import TEST_PASSWORD


async def get_user(db: AsyncSession, email: str) -> User:
    result = await db.execute(
        select(User).where(User.email == email).execution_options(populate_existing=True)
    )
    return result.scalar_one()


# ============================================================
# PASSWORDS AND TOKENS
# ============================================================

def test_password_hash_round_trip():
    encoded = hash_password("hunter22", method="pbkdf2:sha256:1000")
    assert encoded.startswith("pbkdf2:sha256:1000$")
    assert verify_password("hunter22", encoded)
    assert not verify_password("hunter23", encoded)


def test_verify_password_rejects_malformed_hash():
    assert not verify_password("anything", "not-a-hash")
    assert not verify_password("anything", "md5$salt$hash")


def test_session_token_detects_tampering():
    token = create_session_token("abc")
    assert read_session_token(token) == "abc"
    header, payload, signature = token.split(".")
    assert read_session_token(f"{header}.{payload}.{signature[::-1]}") is None
    assert read_session_token(jwt.encode({"sub": "abc"}, "another-key-of-sufficient-length!!", algorithm="HS256")) is None
    assert read_session_token("no-signature") is None
    assert read_session_token(None) is None


# ============================================================
# SIGNUP AND CONFIRMATION
# ============================================================

@pytest.mark.asyncio
async def test_signup_creates_unconfirmed_user(async_client: AsyncClient, db: AsyncSession):
    response = await async_client.post(
        "/api/auth/signup",
        json={"email": "New.User@Example.com", "password": "secret123", "first_name": "New"}
    )

    assert response.status_code == 201
    assert response.json()["email"] == "new.user@example.com"

    user = await get_user(db, "new.user@example.com")
    assert user.first_name == "New"
    assert user.password_hash != "secret123"
    assert verify_password("secret123", user.password_hash)
    assert not user.is_email_verified()
    assert user.email_verification_token


@pytest.mark.asyncio
async def test_signup_rejects_short_password(async_client: AsyncClient):
    response = await async_client.post(
        "/api/auth/signup", json={"email": "short@example.com", "password": "12345"}
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_signup_duplicate_email(async_client: AsyncClient, test_user: User):
    response = await async_client.post(
        "/api/auth/signup", json={"email": "TestUser@example.com", "password": "secret123"}
    )

    assert response.status_code == 409
    assert response.json()["detail"] == "User already registered"


@pytest.mark.asyncio
async def test_verify_email_signs_in_once(async_client: AsyncClient, db: AsyncSession):
    await async_client.post(
        "/api/auth/signup", json={"email": "confirm@example.com", "password": "secret123"}
    )
    user = await get_user(db, "confirm@example.com")
    token = user.email_verification_token

    response = await async_client.post("/api/auth/verify-email", json={"token": token})

    assert response.status_code == 200
    assert response.json()["email"] == "confirm@example.com"
    assert "auth_token=" in response.headers["set-cookie"]

    user = await get_user(db, "confirm@example.com")
    assert user.is_email_verified()
    assert user.email_verification_token is None

    # One-time use
    response = await async_client.post("/api/auth/verify-email", json={"token": token})
    assert response.status_code == 401


# ============================================================
# LOGIN
# ============================================================

@pytest.mark.asyncio
async def test_login_success(async_client: AsyncClient, db: AsyncSession, test_user: User):
    response = await async_client.post(
        "/api/auth/login",
        json={"email": "testuser@example.com", "password": TEST_PASSWORD},
        headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["user_id"] == str(test_user.id)
    assert data["first_name"] == "Test"
    assert read_session_token(data["access_token"]) == str(test_user.id)
    set_cookie = response.headers["set-cookie"]
    assert "auth_token=" in set_cookie
    assert "httponly" in set_cookie.lower()

    user = await get_user(db, "testuser@example.com")
    assert user.last_login_ip == "203.0.113.7"
    assert user.last_login_at is not None


@pytest.mark.asyncio
async def test_login_wrong_password(async_client: AsyncClient, db: AsyncSession, test_user: User):
    response = await async_client.post(
        "/api/auth/login", json={"email": "testuser@example.com", "password": "wrong-password"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid login credentials"
    user = await get_user(db, "testuser@example.com")
    assert user.failed_login_attempts == 1


@pytest.mark.asyncio
async def test_login_unknown_email(async_client: AsyncClient):
    response = await async_client.post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_unconfirmed_email(async_client: AsyncClient):
    await async_client.post(
        "/api/auth/signup", json={"email": "pending@example.com", "password": "secret123"}
    )
    response = await async_client.post(
        "/api/auth/login", json={"email": "pending@example.com", "password": "secret123"}
    )

    assert response.status_code == 403
    assert response.json()["detail"] == "Email not confirmed"


@pytest.mark.asyncio
async def test_account_locks_after_five_failures(async_client: AsyncClient, db: AsyncSession, test_user: User):
    for _ in range(5):
        response = await async_client.post(
            "/api/auth/login", json={"email": "testuser@example.com", "password": "wrong-password"}
        )
        assert response.status_code == 401

    user = await get_user(db, "testuser@example.com")
    assert user.is_account_locked()

    # Correct password is refused while locked
    response = await async_client.post(
        "/api/auth/login", json={"email": "testuser@example.com", "password": TEST_PASSWORD}
    )
    assert response.status_code == 403
    assert "locked" in response.json()["detail"]


@pytest.mark.asyncio
async def test_successful_login_resets_failed_attempts(async_client: AsyncClient, db: AsyncSession, test_user: User):
    test_user.failed_login_attempts = 3
    test_user.account_locked_until = datetime.utcnow() - timedelta(minutes=1)
    await db.commit()

    response = await async_client.post(
        "/api/auth/login", json={"email": "testuser@example.com", "password": TEST_PASSWORD}
    )

    assert response.status_code == 200
    user = await get_user(db, "testuser@example.com")
    assert user.failed_login_attempts == 0
    assert user.account_locked_until is None


# ============================================================
# SESSION
# ============================================================

@pytest.mark.asyncio
async def test_me_with_session_cookie(client: AsyncClient, test_user: User):
    response = await client.get("/api/auth/me")

    assert response.status_code == 200
    assert response.json()["email"] == "testuser@example.com"


@pytest.mark.asyncio
async def test_me_rejects_forged_cookie(async_client: AsyncClient, test_user: User):
    # A bare user id (no signature) must not authenticate
    async_client.cookies.set("auth_token", str(test_user.id))
    response = await async_client.get("/api/auth/me")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_logout(client: AsyncClient):
    response = await client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json()["message"] == "Successfully logged out"


@pytest.mark.asyncio
async def test_logout_requires_auth(async_client: AsyncClient):
    response = await async_client.post("/api/auth/logout")
    assert response.status_code == 401
