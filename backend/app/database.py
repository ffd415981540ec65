"""
Configuration de la connexion à la base de données.
PostgreSQL en production, SQLite accepté pour le développement local et les tests.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from app.config import settings

engine_kwargs = {"echo": settings.SQL_ECHO}

if settings.DATABASE_URL.startswith("sqlite"):
    # SQLite refuse par défaut les connexions partagées entre threads (FastAPI est multi-thread)
    engine_kwargs["connect_args"] = {"check_same_thread": False}
else:
    engine_kwargs["pool_pre_ping"] = True

engine = create_engine(settings.DATABASE_URL, **engine_kwargs)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dépendance FastAPI : fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Crée les tables manquantes (students, users) à partir des modèles enregistrés."""
    import app.models  # noqa: F401 : enregistre les modèles dans Base.metadata

    Base.metadata.create_all(bind=engine)
