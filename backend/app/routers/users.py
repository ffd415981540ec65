"""
Router pour les utilisateurs : inscription et connexion.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories.user_repository import UserRepository
from app.schemas.user import LoginRequest, LoginResponse, RegisterRequest, UserResponse
from app.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["Utilisateurs"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dépendance FastAPI : un service par requête, lié à la session de la requête."""
    return UserService(UserRepository(db))


@router.post("/register", response_model=UserResponse, summary="Inscrire un utilisateur")
def register_user(data: RegisterRequest, service: UserService = Depends(get_user_service)):
    """Inscrit un utilisateur. 409 si le username est déjà pris. Le mot de passe n'est jamais renvoyé."""
    return service.register(data)


@router.post("/login", response_model=LoginResponse, summary="Connexion")
def login_user(data: LoginRequest, service: UserService = Depends(get_user_service)):
    """Vérifie les identifiants. 401 si invalides. Aucun jeton n'est émis."""
    return service.login(data)
