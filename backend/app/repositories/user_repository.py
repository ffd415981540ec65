"""
Accès aux données des utilisateurs. L'unicité du username est garantie par l'index unique.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.user import User


class UserRepository:
    """Repository SQLAlchemy de la table users, lié à une session."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> Optional[User]:
        return self.db.execute(
            select(User).where(User.username == username)
        ).scalar_one_or_none()

    def exists_by_username(self, username: str) -> bool:
        return self.db.execute(
            select(User.id).where(User.username == username).limit(1)
        ).scalar() is not None

    def save(self, user: User) -> User:
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user
