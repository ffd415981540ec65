"""
Briques communes des schémas Pydantic.

Les corps JSON de l'API utilisent des clés camelCase (firstName, createdAt...) ;
les noms snake_case sont aussi acceptés en entrée.
"""

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Modèle de base : alias camelCase en JSON, snake_case côté Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldError(BaseModel):
    """Erreur de validation rattachée à un champ."""
    field: str
    message: str
    type: str


def not_blank(v: str) -> str:
    """Rejette une chaîne vide ou composée d'espaces, retourne la valeur nettoyée."""
    if not v.strip():
        raise ValueError("Le champ ne peut pas être vide.")
    return v.strip()


def to_field_errors(errors: Iterable[dict[str, Any]]) -> List[FieldError]:
    """
    Convertit les erreurs Pydantic (exc.errors()) en liste d'erreurs par champ.
    Le préfixe de localisation FastAPI ("body", "path", "query") est retiré.
    """
    result = []
    for e in errors:
        loc = [str(part) for part in e.get("loc", ())]
        if loc and loc[0] in ("body", "path", "query"):
            loc = loc[1:]
        result.append(FieldError(
            field=".".join(loc) or "__root__",
            message=e.get("msg", ""),
            type=e.get("type", ""),
        ))
    return result


_email_adapter = TypeAdapter(EmailStr)


def normalize_email(value: str) -> Optional[str]:
    """
    Applique la même normalisation qu'EmailStr (domaine en minuscules) à une valeur brute.
    Retourne None si la valeur n'est pas un email valide.
    """
    try:
        return _email_adapter.validate_python(value)
    except ValidationError:
        return None
