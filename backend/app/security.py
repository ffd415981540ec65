"""
Hachage des mots de passe (PBKDF2-HMAC-SHA256).

Format stocké : "<sel hex>$<hash hex>". Le nombre d'itérations vient de la configuration
et doit rester identique entre l'enregistrement et la vérification.
"""

import hashlib
import hmac
import os
from typing import Optional

from app.config import settings

SALT_BYTES = 16


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Retourne le sel et le hash du mot de passe, séparés par '$'."""
    salt = os.urandom(SALT_BYTES)
    dk = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt, iterations or settings.PASSWORD_HASH_ITERATIONS
    )
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str, iterations: Optional[int] = None) -> bool:
    """
    Recalcule le hash avec le sel stocké et compare en temps constant.
    Un hash stocké mal formé est traité comme un échec de vérification.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac(
        "sha256", plain_password.encode("utf-8"), salt, iterations or settings.PASSWORD_HASH_ITERATIONS
    )
    return hmac.compare_digest(dk, stored_hash)
