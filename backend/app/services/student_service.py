"""
Service métier pour les élèves.

Règles :
- l'email d'un élève est unique (vérifié avant insertion et modification ;
  l'index unique de la table reste la garantie en cas de requêtes concurrentes) ;
- le statut vaut ACTIVE s'il n'est pas fourni à la création ;
- createdAt est posé une fois, updatedAt à la création et à chaque modification ;
- la modification remplace tous les champs modifiables, sauf les cours.
"""

import uuid
import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from app.config import settings
from app.errors import DuplicateResourceError, ResourceNotFoundError
from app.models.student import Student
from app.repositories.student_repository import StudentRepository
from app.schemas.common import normalize_email
from app.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)

RESOURCE = "Élève"

# Champs écrasés par update() ; `courses` n'en fait pas partie
UPDATABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone_number",
    "department",
    "status",
    "year",
    "gpa",
    "address",
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class StudentService:
    """Logique métier des élèves. Ne conserve aucun état hors du repository injecté."""

    def __init__(self, repository: StudentRepository):
        self.repository = repository

    def create(self, data: StudentCreate) -> Student:
        """
        Crée un élève.

        Étapes :
        1. Rejeter si l'email est déjà utilisé
        2. Poser createdAt et updatedAt
        3. Statut par défaut si absent
        4. Persister
        """
        logger.info("Création de l'élève avec l'email : %s", data.email)

        if self.repository.exists_by_email(data.email):
            logger.warning("Création refusée, email déjà utilisé : %s", data.email)
            raise DuplicateResourceError(RESOURCE, "email", data.email)

        now = _now()
        student = Student(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone_number=data.phone_number,
            address=data.address,
            department=data.department,
            year=data.year,
            gpa=data.gpa,
            courses=[c.model_dump() for c in data.courses] if data.courses is not None else None,
            status=data.status if data.status is not None else settings.DEFAULT_STUDENT_STATUS,
            created_at=now,
            updated_at=now,
        )
        return self._save(student)

    def list_all(self) -> list[Student]:
        logger.info("Récupération de tous les élèves")
        return self.repository.find_all()

    def get_by_id(self, student_id: uuid.UUID) -> Student:
        """Retourne l'élève ou lève ResourceNotFoundError."""
        logger.info("Récupération de l'élève : %s", student_id)
        student = self.repository.find_by_id(student_id)
        if student is None:
            raise ResourceNotFoundError(RESOURCE, "id", student_id)
        return student

    def get_by_email(self, email: str) -> Student:
        """
        Retourne l'élève ou lève ResourceNotFoundError.
        L'email est normalisé comme à la création ; un email invalide ne correspond à aucun élève.
        """
        logger.info("Récupération de l'élève avec l'email : %s", email)
        normalized = normalize_email(email)
        student = self.repository.find_by_email(normalized) if normalized is not None else None
        if student is None:
            raise ResourceNotFoundError(RESOURCE, "email", email)
        return student

    def update(self, student_id: uuid.UUID, data: StudentUpdate) -> Student:
        """
        Remplace les champs modifiables d'un élève existant.
        Les valeurs absentes du payload (gpa, status) sont écrites à None ; les cours ne sont pas modifiés.
        """
        logger.info("Modification de l'élève : %s", student_id)
        student = self.get_by_id(student_id)

        if student.email != data.email and self.repository.exists_by_email(data.email):
            logger.warning("Modification refusée, email déjà utilisé : %s", data.email)
            raise DuplicateResourceError(RESOURCE, "email", data.email)

        for field in UPDATABLE_FIELDS:
            setattr(student, field, getattr(data, field))
        student.updated_at = _now()

        return self._save(student)

    def delete(self, student_id: uuid.UUID) -> None:
        logger.info("Suppression de l'élève : %s", student_id)
        student = self.get_by_id(student_id)
        self.repository.delete(student)

    # --- Recherches (liste vide si aucun résultat) ---

    def by_department(self, department: str) -> list[Student]:
        logger.info("Récupération des élèves du département : %s", department)
        return self.repository.find_by_department(department)

    def by_status(self, status: str) -> list[Student]:
        logger.info("Récupération des élèves au statut : %s", status)
        return self.repository.find_by_status(status)

    def by_year(self, year: int) -> list[Student]:
        logger.info("Récupération des élèves de l'année : %d", year)
        return self.repository.find_by_year(year)

    def search_by_first_name(self, fragment: str) -> list[Student]:
        logger.info("Recherche des élèves dont le prénom contient : %s", fragment)
        return self.repository.find_by_first_name_containing(fragment)

    def search_by_last_name(self, fragment: str) -> list[Student]:
        logger.info("Recherche des élèves dont le nom contient : %s", fragment)
        return self.repository.find_by_last_name_containing(fragment)

    def by_minimum_gpa(self, threshold: float) -> list[Student]:
        logger.info("Récupération des élèves avec une moyenne >= %s", threshold)
        return self.repository.find_by_gpa_at_least(threshold)

    def _save(self, student: Student) -> Student:
        """Persiste l'élève ; l'index unique sur l'email rattrape les créations concurrentes."""
        # Lu avant save() : le rollback expire l'instance et rechargerait l'ancien email
        email = student.email
        try:
            return self.repository.save(student)
        except IntegrityError:
            logger.warning("Contrainte d'unicité violée à l'écriture : %s", email)
            raise DuplicateResourceError(RESOURCE, "email", email)
