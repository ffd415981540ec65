"""
Schémas Pydantic pour les élèves.
Ils constituent le contrat de validation d'entrée : une requête qui ne les respecte pas
est rejetée (422) avant d'atteindre le service.
"""

import uuid
from datetime import datetime
from typing import Any, List, Optional, Tuple

from pydantic import EmailStr, ValidationError, field_validator

from app.schemas.common import CamelModel, FieldError, not_blank, to_field_errors


class Course(CamelModel):
    """Cours suivi par un élève. Tous les champs sont du texte libre."""
    course_id: Optional[str] = None
    course_name: Optional[str] = None
    course_code: Optional[str] = None
    credits: Optional[str] = None
    grade: Optional[str] = None


class StudentCreate(CamelModel):
    """Schéma de création d'un élève (POST /api/students)."""
    first_name: str
    last_name: str
    email: EmailStr
    phone_number: str
    address: str
    department: str
    year: int
    gpa: Optional[float] = None
    courses: Optional[List[Course]] = None
    status: Optional[str] = None

    @field_validator("first_name", "last_name", "phone_number", "address", "department")
    @classmethod
    def required_not_blank(cls, v: str) -> str:
        return not_blank(v)


class StudentUpdate(StudentCreate):
    """
    Schéma de remplacement complet d'un élève (PUT /api/students/{id}).
    Mêmes règles que la création ; `courses` est accepté mais ignoré par la mise à jour.
    """


class StudentResponse(CamelModel):
    """Schéma de réponse pour un élève."""
    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    phone_number: str
    address: str
    department: str
    year: int
    gpa: Optional[float] = None
    courses: Optional[List[Course]] = None
    status: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


def validate_student_payload(raw: Any) -> Tuple[Optional[StudentCreate], List[FieldError]]:
    """
    Valide un corps brut d'élève hors du cycle FastAPI.
    Retourne (élève validé, []) ou (None, erreurs par champ). Ne lève jamais ValidationError.
    """
    try:
        return StudentCreate.model_validate(raw), []
    except ValidationError as exc:
        return None, to_field_errors(exc.errors())
