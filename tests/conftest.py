"""Fixtures compartilhadas: SQLite em memória, usuários e clientes autenticados."""

import os

# precisa vir antes de importar config.settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["JWT_ALGORITHM"] = "HS256"

import pytest
from fastapi.testclient import TestClient

from config.database import Base, SessionLocal, engine
from app.models import auth_models, weekly_report_model  # noqa: F401
from app.schemas.auth_schema import UserUpsert
from app.services.user_store import upsert_user
from app.utils.tokens import jwt_for_user
from main import app


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    return TestClient(app)


@pytest.fixture
def user_a(db):
    return upsert_user(db, UserUpsert(id="user-a", email="ana@ecole.fr", first_name="Ana"))


@pytest.fixture
def user_b(db):
    return upsert_user(db, UserUpsert(id="user-b", email="bruno@ecole.fr", first_name="Bruno"))


def bearer(user_id, **claims):
    return {"Authorization": f"Bearer {jwt_for_user(user_id, **claims)}"}


@pytest.fixture
def headers_a():
    return bearer("user-a", email="ana@ecole.fr", first_name="Ana")


@pytest.fixture
def headers_b():
    return bearer("user-b", email="bruno@ecole.fr", first_name="Bruno")


@pytest.fixture
def report_payload():
    """Payload mínimo, como o formulário envia sem nenhuma caixa marcada."""
    return {
        "studentFirstName": "Asma",
        "studentLastName": "Martin",
        "studentClass": "ce1",
        "observerName": "Mme Durand",
        "weekStartDate": "2024-01-01",
        "weekEndDate": "2024-01-05",
    }


@pytest.fixture
def make_headers():
    return bearer
