"""
Modèle SQLAlchemy pour les utilisateurs.
Le mot de passe n'est jamais stocké en clair : seul son hash PBKDF2 est conservé.
"""

import uuid
from sqlalchemy import Boolean, Column, DateTime, String, Uuid

from app.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    full_name = Column(String(200), nullable=False)
    role = Column(String(50), nullable=False)  # ADMIN, TEACHER, STAFF...
    active = Column(Boolean, default=False, nullable=False)
    last_login = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)
