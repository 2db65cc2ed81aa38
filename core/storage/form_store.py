from __future__ import annotations
import logging
from operator import attrgetter
from typing import Iterable, Iterator, List, Optional

from core.models.form import FormData

logger = logging.getLogger(__name__)


class FormStore:
    """
    Liste ordonnée des formulaires en cours d'édition.
    - ordre d'insertion, sauf après sort_by_display_name()
    - jamais vide : un formulaire par défaut est créé si besoin
    - les formulaires ajoutés sont copiés (le store en est seul propriétaire)
    """

    def __init__(self, forms: Optional[Iterable[FormData]] = None) -> None:
        self._forms: List[FormData] = [f.model_copy(deep=True) for f in (forms or ())]
        if not self._forms:
            self._forms.append(FormData.create_default())

    # ---------------- Lecture ---------------- #

    def _check_index(self, index: int) -> None:
        # pas d'index négatif "à la Python" : 0 <= index < size
        if not 0 <= index < len(self._forms):
            raise IndexError(f"form index {index} out of range (size={len(self._forms)})")

    def at(self, index: int) -> FormData:
        self._check_index(index)
        return self._forms[index]

    def size(self) -> int:
        return len(self._forms)

    def __len__(self) -> int:
        return len(self._forms)

    def __iter__(self) -> Iterator[FormData]:
        return iter(list(self._forms))

    def display_names(self) -> List[str]:
        return [f.display_name for f in self._forms]

    def index_of_display_name(self, name: str) -> int:
        """Premier formulaire portant ce nom dans l'ordre courant, -1 sinon."""
        for i, f in enumerate(self._forms):
            if f.display_name == name:
                return i
        return -1

    # ---------------- Écriture ---------------- #

    def add(self, form: FormData) -> int:
        self._forms.append(form.model_copy(deep=True))
        return len(self._forms) - 1

    def new_form(self) -> int:
        idx = self.add(FormData.create_default())
        logger.debug("New default form at index %d", idx)
        return idx

    def replace_at(self, index: int, form: FormData) -> None:
        self._check_index(index)
        self._forms[index] = form.model_copy(deep=True)

    def sort_by_display_name(self) -> None:
        # list.sort est stable : les homonymes gardent leur ordre relatif
        self._forms.sort(key=attrgetter("display_name"))
