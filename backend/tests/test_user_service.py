"""
Tests unitaires pour le service des utilisateurs (inscription, connexion).
"""

import uuid
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from app.errors import DuplicateResourceError, InvalidCredentialsError
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import LoginRequest, RegisterRequest
from app.security import hash_password, verify_password
from app.services.user_service import UserService


# --- Helpers ---

def make_request(**kwargs) -> RegisterRequest:
    data = {
        "username": "ada",
        "password": "s3cret!",
        "email": "ada@x.com",
        "full_name": "Ada Lovelace",
        "role": "ADMIN",
    }
    data.update(kwargs)
    return RegisterRequest(**data)


def _assign_id(user: User) -> User:
    if user.id is None:
        user.id = uuid.uuid4()
    return user


def make_service(username_taken=False, existing=None):
    repo = MagicMock(spec=UserRepository)
    repo.exists_by_username.return_value = username_taken
    repo.find_by_username.return_value = existing
    repo.save.side_effect = _assign_id
    return UserService(repo), repo


def make_user(password="s3cret!", active=True) -> User:
    return User(
        id=uuid.uuid4(),
        username="ada",
        password_hash=hash_password(password),
        email="ada@x.com",
        full_name="Ada Lovelace",
        role="ADMIN",
        active=active,
    )


# --- register ---

def test_register_succes_sans_mot_de_passe_dans_la_reponse():
    service, repo = make_service()
    response = service.register(make_request())

    assert response.username == "ada"
    assert response.full_name == "Ada Lovelace"
    assert response.active is True
    assert response.created_at is not None
    assert response.last_login is None
    dumped = response.model_dump(by_alias=True)
    assert "password" not in dumped
    assert "passwordHash" not in dumped
    assert "s3cret!" not in str(dumped)


def test_register_hache_le_mot_de_passe():
    service, repo = make_service()
    service.register(make_request())

    saved = repo.save.call_args[0][0]
    assert saved.password_hash != "s3cret!"
    assert verify_password("s3cret!", saved.password_hash)


def test_register_username_duplique():
    service, repo = make_service(username_taken=True)
    with pytest.raises(DuplicateResourceError, match="ada"):
        service.register(make_request())
    repo.save.assert_not_called()


def test_register_index_unique_traduit_en_doublon():
    service, repo = make_service()
    repo.save.side_effect = IntegrityError("duplicate", None, None)
    with pytest.raises(DuplicateResourceError):
        service.register(make_request())


def test_register_deux_utilisateurs_meme_mot_de_passe():
    """Aucune contrainte d'unicité sur le mot de passe ; les hash diffèrent (sel aléatoire)."""
    service, repo = make_service()
    service.register(make_request(username="ada"))
    service.register(make_request(username="grace"))
    first, second = (c[0][0] for c in repo.save.call_args_list)
    assert first.password_hash != second.password_hash


# --- login ---

def test_login_succes_pose_last_login():
    user = make_user()
    service, repo = make_service(existing=user)
    response = service.login(LoginRequest(username="ada", password="s3cret!"))

    assert response.success is True
    assert response.user_id == user.id
    assert user.last_login is not None
    repo.save.assert_called_once_with(user)


def test_login_mauvais_mot_de_passe():
    service, repo = make_service(existing=make_user())
    with pytest.raises(InvalidCredentialsError):
        service.login(LoginRequest(username="ada", password="wrong"))
    repo.save.assert_not_called()


def test_login_utilisateur_inconnu():
    service, _ = make_service(existing=None)
    with pytest.raises(InvalidCredentialsError):
        service.login(LoginRequest(username="nobody", password="x"))


def test_login_compte_inactif():
    service, _ = make_service(existing=make_user(active=False))
    with pytest.raises(InvalidCredentialsError):
        service.login(LoginRequest(username="ada", password="s3cret!"))
