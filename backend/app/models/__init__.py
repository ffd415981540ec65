# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant create_tables() et avant le premier accès aux repositories.

from app.models.student import Student  # noqa: F401
from app.models.user import User  # noqa: F401
