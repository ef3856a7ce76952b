from datetime import datetime, timezone
from uuid import UUID

from jose import jwt
from sqlmodel import select

from app.api import auth as auth_api
from app.core.config import ALGORITHM, SECRET_KEY
from app.core.security import create_access_token
from app.models.profile import Profile
from app.models.user import User
from app.scripts.backfill_profiles import backfill_profiles


def test_root(client):
    assert client.get("/").json() == {"message": "Servidor de finanzas personales"}


def test_register_login_and_me(client):
    response = client.post("/auth/register", json={"email": "luis@example.com", "password": "clave-segura"})
    assert response.status_code == 200
    user_id = response.json()["id"]

    token = client.post(
        "/auth/login", data={"username": "luis@example.com", "password": "clave-segura"}
    ).json()["access_token"]

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["user_id"] == user_id


def test_duplicate_email_is_rejected(client):
    payload = {"email": "dup@example.com", "password": "clave-segura"}
    assert client.post("/auth/register", json=payload).status_code == 200
    response = client.post("/auth/register", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"] == "Email ya registrado"


def test_wrong_password(client):
    client.post("/auth/register", json={"email": "x@example.com", "password": "clave-segura"})
    response = client.post("/auth/login", data={"username": "x@example.com", "password": "otra"})
    assert response.status_code == 401


def test_protected_routes_need_token(client):
    assert client.get("/accounts").status_code == 401
    assert client.get("/profile", headers={"Authorization": "Bearer basura"}).status_code == 401


def test_backfill_creates_missing_profiles(session):
    user = User(email="antiguo@example.com", hashed_password="x")
    session.add(user)
    session.commit()

    assert backfill_profiles(session) == 1
    assert session.get(Profile, user.id) is not None
    assert backfill_profiles(session) == 0


def test_register_creates_profile_in_same_commit(client, session):
    user_id = client.post(
        "/auth/register", json={"email": "perfil@example.com", "password": "clave-segura"}
    ).json()["id"]
    assert session.get(Profile, UUID(user_id)) is not None


def test_concurrent_duplicate_email_is_400(client, session, monkeypatch):
    payload = {"email": "carrera@example.com", "password": "clave-segura"}
    assert client.post("/auth/register", json=payload).status_code == 200

    # simula que la comprobación previa no vio el otro registro
    monkeypatch.setattr(auth_api, "get_user_by_email", lambda *args: None)
    response = client.post("/auth/register", json=payload)
    assert response.status_code == 400
    assert len(session.exec(select(User)).all()) == 1
    assert len(session.exec(select(Profile)).all()) == 1


def test_token_expiry_is_in_the_future():
    token = create_access_token({"sub": "abc"})
    payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    assert payload["exp"] > datetime.now(timezone.utc).timestamp()
