from __future__ import annotations
import os

# Dossier proposé par défaut pour l'import / export des formulaires
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
FORMS_DIR = os.path.join(BASE_DIR, "Forms")

ARCHIVE_FORMAT = "form-fillout"
ARCHIVE_VERSION = 1
ARCHIVE_SUFFIX = ".json"
ARCHIVE_FILTER = "Formulaires (*.json);;Tous les fichiers (*)"

BACKUP_ENABLED = True
BACKUP_KEEP = 5

# Valeurs d'un formulaire vierge ("New Form" / "Reset")
DEFAULT_FIRST_NAME = "fn"
DEFAULT_MIDDLE_INITIAL = "m"
DEFAULT_LAST_NAME = "ln"
DEFAULT_DISPLAY_NAME = "dn"
DEFAULT_SSN = "111111111"
DEFAULT_PHONE = "1234567890"
DEFAULT_EMAIL = "test@ou.edu"
DEFAULT_ADDRESS = "111 first st"

# Le SSN n'est jamais écrit sur disque : valeur restaurée à la relecture
REDACTED_SSN = "000000000"
