"""
Erreurs métier du service de gestion des dossiers (élèves, utilisateurs).

Chaque erreur porte un code stable et le statut HTTP vers lequel l'API la traduit.
Ce sont des erreurs terminales : jamais relancées ni récupérées dans les services.
Les erreurs d'infrastructure (connexion BDD, etc.) ne sont pas traduites ici.
"""


class RecordServiceError(Exception):
    """Base de toutes les erreurs métier."""

    code = "RECORD_SERVICE_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"detail": self.message, "code": self.code}


class ResourceNotFoundError(RecordServiceError):
    """Aucun enregistrement ne correspond à l'identifiant ou à l'email recherché."""

    code = "RESOURCE_NOT_FOUND"
    http_status = 404

    def __init__(self, resource_type: str, field: str, value):
        super().__init__(f"{resource_type} introuvable ({field} = {value}).")
        self.resource_type = resource_type
        self.field = field
        self.value = value


class DuplicateResourceError(RecordServiceError):
    """La création ou la modification violerait une contrainte d'unicité (email, username)."""

    code = "DUPLICATE_RESOURCE"
    http_status = 409

    def __init__(self, resource_type: str, field: str, value):
        super().__init__(f"{resource_type} avec {field} '{value}' existe déjà.")
        self.resource_type = resource_type
        self.field = field
        self.value = value


class InvalidCredentialsError(RecordServiceError):
    """Identifiants incorrects ou compte désactivé. Message volontairement générique."""

    code = "INVALID_CREDENTIALS"
    http_status = 401

    def __init__(self):
        super().__init__("Nom d'utilisateur ou mot de passe incorrect.")
