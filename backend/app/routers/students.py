"""
Router pour les élèves.
CRUD : POST/GET/PUT/DELETE /api/students
Recherches : département, statut, année, prénom, nom, moyenne minimale.

Les erreurs métier (introuvable, doublon) sont traduites en 404/409 par les
handlers globaux (app.error_handlers).
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories.student_repository import StudentRepository
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services.student_service import StudentService

router = APIRouter(prefix="/api/students", tags=["Élèves"])


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    """Dépendance FastAPI : un service par requête, lié à la session de la requête."""
    return StudentService(StudentRepository(db))


@router.post("", response_model=StudentResponse, summary="Créer un élève")
def create_student(data: StudentCreate, service: StudentService = Depends(get_student_service)):
    """Crée un élève. 409 si l'email est déjà utilisé ; statut ACTIVE par défaut."""
    return service.create(data)


@router.get("", response_model=List[StudentResponse], summary="Lister tous les élèves")
def list_students(service: StudentService = Depends(get_student_service)):
    return service.list_all()


@router.get("/email/{email}", response_model=StudentResponse, summary="Élève par email")
def get_student_by_email(email: str, service: StudentService = Depends(get_student_service)):
    return service.get_by_email(email)


@router.get("/department/{department}", response_model=List[StudentResponse],
            summary="Élèves d'un département")
def get_students_by_department(department: str, service: StudentService = Depends(get_student_service)):
    return service.by_department(department)


@router.get("/status/{status}", response_model=List[StudentResponse], summary="Élèves par statut")
def get_students_by_status(status: str, service: StudentService = Depends(get_student_service)):
    return service.by_status(status)


@router.get("/search/firstName/{first_name}", response_model=List[StudentResponse],
            summary="Recherche par prénom")
def search_by_first_name(first_name: str, service: StudentService = Depends(get_student_service)):
    """Prénoms contenant le fragment, sans tenir compte de la casse."""
    return service.search_by_first_name(first_name)


@router.get("/search/lastName/{last_name}", response_model=List[StudentResponse],
            summary="Recherche par nom")
def search_by_last_name(last_name: str, service: StudentService = Depends(get_student_service)):
    """Noms contenant le fragment, sans tenir compte de la casse."""
    return service.search_by_last_name(last_name)


@router.get("/year/{year}", response_model=List[StudentResponse], summary="Élèves par année")
def get_students_by_year(year: int, service: StudentService = Depends(get_student_service)):
    return service.by_year(year)


@router.get("/gpa/{min_gpa}", response_model=List[StudentResponse], summary="Élèves par moyenne minimale")
def get_students_by_minimum_gpa(min_gpa: float, service: StudentService = Depends(get_student_service)):
    """Élèves dont la moyenne est >= min_gpa (borne incluse). Les élèves sans moyenne sont exclus."""
    return service.by_minimum_gpa(min_gpa)


@router.get("/{student_id}", response_model=StudentResponse, summary="Détail d'un élève")
def get_student(student_id: uuid.UUID, service: StudentService = Depends(get_student_service)):
    return service.get_by_id(student_id)


@router.put("/{student_id}", response_model=StudentResponse, summary="Remplacer un élève")
def update_student(
    student_id: uuid.UUID,
    data: StudentUpdate,
    service: StudentService = Depends(get_student_service),
):
    """Remplace tous les champs modifiables de l'élève. Les cours existants sont conservés."""
    return service.update(student_id, data)


@router.delete("/{student_id}", status_code=204, summary="Supprimer un élève")
def delete_student(student_id: uuid.UUID, service: StudentService = Depends(get_student_service)):
    """Supprime définitivement un élève et ses cours."""
    service.delete(student_id)
