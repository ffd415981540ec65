"""
Modèle SQLAlchemy pour la table students.
Les cours sont stockés dans la ligne de l'élève (document JSON) : ils n'ont pas
d'identité propre et disparaissent avec l'élève.
"""

import uuid
from sqlalchemy import JSON, Column, DateTime, Float, Integer, String, Uuid

from app.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    phone_number = Column(String(50), nullable=False)
    address = Column(String(500), nullable=False)
    department = Column(String(100), nullable=False, index=True)
    year = Column(Integer, nullable=False, index=True)
    gpa = Column(Float, nullable=True)
    courses = Column(JSON, nullable=True)  # liste de {course_id, course_name, course_code, credits, grade}
    status = Column(String(50), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
