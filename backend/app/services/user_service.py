"""
Service métier pour les utilisateurs : inscription et connexion.
Le mot de passe est haché avant stockage et n'apparaît dans aucune réponse ni aucun log.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from app.errors import DuplicateResourceError, InvalidCredentialsError
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import LoginRequest, LoginResponse, RegisterRequest, UserResponse
from app.security import hash_password, verify_password

logger = logging.getLogger(__name__)

RESOURCE = "Utilisateur"


class UserService:
    """Logique métier des utilisateurs, construite autour d'un UserRepository."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def register(self, data: RegisterRequest) -> UserResponse:
        """
        Inscrit un utilisateur.
        Lève DuplicateResourceError si le username est déjà pris.
        """
        logger.info("Inscription de l'utilisateur : %s", data.username)

        if self.repository.exists_by_username(data.username):
            logger.warning("Inscription refusée, username déjà pris : %s", data.username)
            raise DuplicateResourceError(RESOURCE, "username", data.username)

        now = datetime.now(timezone.utc)
        user = User(
            username=data.username,
            password_hash=hash_password(data.password),
            email=data.email,
            full_name=data.full_name,
            role=data.role,
            active=True,
            created_at=now,
            updated_at=now,
            last_login=None,
        )
        try:
            user = self.repository.save(user)
        except IntegrityError:
            raise DuplicateResourceError(RESOURCE, "username", data.username)

        return UserResponse.model_validate(user)

    def login(self, data: LoginRequest) -> LoginResponse:
        """
        Vérifie les identifiants et enregistre la date de dernière connexion.
        Username inconnu, mot de passe faux ou compte inactif : même InvalidCredentialsError.
        """
        user = self.repository.find_by_username(data.username)
        if user is None or not user.active or not verify_password(data.password, user.password_hash):
            logger.warning("Échec de connexion pour : %s", data.username)
            raise InvalidCredentialsError()

        now = datetime.now(timezone.utc)
        user.last_login = now
        user.updated_at = now
        user = self.repository.save(user)
        logger.info("Connexion réussie : %s", user.username)

        return LoginResponse(
            user_id=user.id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            role=user.role,
            message="Connexion réussie.",
            success=True,
        )
