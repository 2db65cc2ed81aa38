from __future__ import annotations
import logging
from pathlib import Path
from typing import List, NamedTuple, Optional, Union

from pydantic import ValidationError

from core import config
from core.models.form import FormData, SignatureLike, validation_messages
from core.storage.form_store import FormStore
from core.storage.json_repo import FormArchiveRepository

logger = logging.getLogger(__name__)

FORMS_DIR = config.FORMS_DIR

MSG_SAVED = "Form information successfully updated"
MSG_INVALID = "Input info does not match required format."


class SaveResult(NamedTuple):
    success: bool
    message: str
    index: int  # formulaire à resélectionner après le tri


class FormService:
    """
    Orchestrateur de l'éditeur de formulaires.
    - possède le FormStore (pas d'état global)
    - Save : mise à jour validée, tri par display_name, resélection par nom
    - Import / Export via FormArchiveRepository
    """

    def __init__(self, store: Optional[FormStore] = None):
        self._store = store if store is not None else FormStore()

    @property
    def store(self) -> FormStore:
        return self._store

    def display_names(self) -> List[str]:
        return self._store.display_names()

    def get_form(self, index: int) -> FormData:
        return self._store.at(index)

    def new_form(self) -> int:
        return self._store.new_form()

    def reset_form(self, index: int) -> None:
        self._store.at(index).reset()

    def save_form(
        self,
        index: int,
        *,
        first_name: str,
        middle_initial: str,
        last_name: str,
        display_name: str,
        ssn: str,
        phone: str,
        email: str,
        address: str,
        signature: SignatureLike,
    ) -> SaveResult:
        form = self._store.at(index)
        try:
            form.update(
                first_name, middle_initial, last_name, display_name,
                ssn, phone, email, address, signature,
            )
        except ValidationError as exc:
            details = validation_messages(exc)
            logger.info("Save rejected for form #%d: %d invalid field(s)", index, len(details))
            return SaveResult(False, "\n".join([MSG_INVALID, *details]), index)

        self._store.sort_by_display_name()
        # homonymes : le premier dans l'ordre trié l'emporte
        new_index = self._store.index_of_display_name(form.display_name)
        logger.info("Form '%s' saved (index %d -> %d)", form.display_name, index, new_index)
        return SaveResult(True, MSG_SAVED, new_index)

    # ---------------- Import / Export ---------------- #

    def export_forms(self, path: Union[str, Path]) -> None:
        FormArchiveRepository(path).save(self._store)

    def import_forms(self, path: Union[str, Path]) -> FormStore:
        """Remplace le store seulement si la lecture a réussi."""
        self._store = FormArchiveRepository(path).load()
        return self._store
