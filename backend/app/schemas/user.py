"""
Schémas Pydantic pour les utilisateurs.
Aucun schéma de sortie ne contient de champ mot de passe.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, field_validator

from app.schemas.common import CamelModel, not_blank


class RegisterRequest(CamelModel):
    """Corps de requête d'inscription (POST /api/users/register)."""
    username: str
    password: str
    email: Optional[EmailStr] = None
    full_name: str
    role: str

    @field_validator("username", "full_name", "role")
    @classmethod
    def required_not_blank(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, v: str) -> str:
        # Pas de strip : les espaces font partie du mot de passe
        if not v.strip():
            raise ValueError("Le mot de passe ne peut pas être vide.")
        return v


class LoginRequest(CamelModel):
    """Corps de requête de connexion (POST /api/users/login)."""
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        return not_blank(v)


class UserResponse(CamelModel):
    """Projection publique d'un utilisateur."""
    id: uuid.UUID
    username: str
    email: Optional[str] = None
    full_name: str
    role: str
    active: bool
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LoginResponse(CamelModel):
    """Réponse d'une connexion réussie (aucun jeton n'est émis)."""
    user_id: uuid.UUID
    username: str
    email: Optional[str] = None
    full_name: str
    role: str
    message: str
    success: bool
