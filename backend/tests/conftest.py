"""
Configuration partagée pour tous les tests.

- `client` : la dépendance get_db est remplacée par un MagicMock (aucune connexion réelle).
- `db_session` / `sqlite_client` : base SQLite en mémoire, pour tester les requêtes réelles
  (recherche insensible à la casse, seuil de moyenne, index uniques).
"""

import os

# Avant tout import de app : pas de driver PostgreSQL requis, hachage rapide
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import app.models  # noqa: E402,F401
from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
def client():
    """Client HTTP de test avec la BDD mockée."""
    mock_db = MagicMock()
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """Session SQLAlchemy sur une base SQLite en mémoire, recréée pour chaque test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def sqlite_client(db_session):
    """Client HTTP de test branché sur la base SQLite en mémoire."""
    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
