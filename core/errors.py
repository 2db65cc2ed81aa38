from __future__ import annotations


class FormDataError(Exception):
    """Erreur de base des formulaires (hors validation pydantic)."""


class FormArchiveError(FormDataError, ValueError):
    """Archive illisible : pas du JSON, format étranger, champ manquant ou invalide."""


class FormStorageError(FormDataError, OSError):
    """Échec d'entrée/sortie sur le fichier d'archive (chaîné à l'OSError d'origine)."""
