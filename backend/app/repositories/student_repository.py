"""
Accès aux données des élèves.

Primitives de requête exposées au service :
- égalité exacte sur un champ ;
- sous-chaîne insensible à la casse sur un champ texte (ILIKE, non ancré) ;
- seuil « supérieur ou égal » sur un champ numérique (les NULL sont exclus).
L'unicité de l'email est garantie par l'index unique de la table.
"""

import uuid
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import InstrumentedAttribute, Session

from app.models.student import Student

LIKE_ESCAPE = "\\"


def escape_like(fragment: str) -> str:
    """Échappe les jokers LIKE (% et _) pour qu'un fragment soit cherché littéralement."""
    return (
        fragment.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class StudentRepository:
    """Repository SQLAlchemy de la table students, lié à une session."""

    def __init__(self, db: Session):
        self.db = db

    # --- Primitives ---

    def _find_by(self, column: InstrumentedAttribute, value: Any) -> list[Student]:
        return list(self.db.execute(select(Student).where(column == value)).scalars().all())

    def _find_containing(self, column: InstrumentedAttribute, fragment: str) -> list[Student]:
        pattern = f"%{escape_like(fragment)}%"
        return list(
            self.db.execute(
                select(Student).where(column.ilike(pattern, escape=LIKE_ESCAPE))
            ).scalars().all()
        )

    def _find_at_least(self, column: InstrumentedAttribute, threshold: float) -> list[Student]:
        return list(self.db.execute(select(Student).where(column >= threshold)).scalars().all())

    # --- Lectures ---

    def find_all(self) -> list[Student]:
        return list(self.db.execute(select(Student)).scalars().all())

    def find_by_id(self, student_id: uuid.UUID) -> Optional[Student]:
        return self.db.get(Student, student_id)

    def find_by_email(self, email: str) -> Optional[Student]:
        return self.db.execute(
            select(Student).where(Student.email == email)
        ).scalar_one_or_none()

    def exists_by_email(self, email: str) -> bool:
        return self.db.execute(
            select(Student.id).where(Student.email == email).limit(1)
        ).scalar() is not None

    def find_by_department(self, department: str) -> list[Student]:
        return self._find_by(Student.department, department)

    def find_by_status(self, status: str) -> list[Student]:
        return self._find_by(Student.status, status)

    def find_by_year(self, year: int) -> list[Student]:
        return self._find_by(Student.year, year)

    def find_by_first_name_containing(self, fragment: str) -> list[Student]:
        return self._find_containing(Student.first_name, fragment)

    def find_by_last_name_containing(self, fragment: str) -> list[Student]:
        return self._find_containing(Student.last_name, fragment)

    def find_by_gpa_at_least(self, threshold: float) -> list[Student]:
        return self._find_at_least(Student.gpa, threshold)

    # --- Écritures ---

    def save(self, student: Student) -> Student:
        """
        Insère ou met à jour l'élève et le recharge.
        En cas de violation de contrainte, la transaction est annulée et l'IntegrityError remonte.
        """
        self.db.add(student)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(student)
        return student

    def delete(self, student: Student) -> None:
        self.db.delete(student)
        self.db.commit()
