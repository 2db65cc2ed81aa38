from __future__ import annotations

import glob
import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Union

from core import config
from core.errors import FormStorageError
from core.storage.form_codec import FormCodec
from core.storage.form_store import FormStore

logger = logging.getLogger(__name__)


class FormArchiveRepository:
    """
    Fichier d'archive JSON des formulaires (import / export).
    - Rotation de backups (backup_enabled, backup_keep)
    - N'écrit pas si le contenu ne change pas
    - Écriture via fichier temporaire + os.replace : l'ancien fichier reste intact en cas d'échec
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        *,
        backup_enabled: bool = config.BACKUP_ENABLED,
        backup_keep: int = config.BACKUP_KEEP,
    ) -> None:
        self.filepath = Path(filepath)
        self.backup_enabled = backup_enabled
        self.backup_keep = max(0, int(backup_keep))

    def exists(self) -> bool:
        return self.filepath.is_file()

    # ---------------- Backups ---------------- #

    def _backup_pattern(self) -> str:
        return str(self.filepath.with_suffix(".*.bak.json"))

    def _rotate_backups(self) -> None:
        if not self.backup_enabled or self.backup_keep <= 0:
            return
        files = sorted(glob.glob(self._backup_pattern()))
        # garde les plus récents
        for old in files[: max(0, len(files) - self.backup_keep)]:
            try:
                Path(old).unlink(missing_ok=True)
            except OSError as exc:
                logger.warning("Could not delete old backup '%s': %s", old, exc)

    def _backup(self) -> None:
        if not self.backup_enabled or self.backup_keep <= 0 or not self.filepath.exists():
            return
        ts = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
        backup = self.filepath.with_suffix(f".{ts}.bak.json")
        try:
            shutil.copy2(self.filepath, backup)
        except OSError as exc:
            raise FormStorageError(f"cannot back up {self.filepath}: {exc}") from exc
        self._rotate_backups()

    # ---------------- I/O ---------------- #

    def load(self) -> FormStore:
        logger.info("Importing forms from %s", self.filepath)
        try:
            with self.filepath.open("rb") as f:
                store = FormCodec.load(f)
        except FormStorageError:
            raise
        except OSError as exc:
            raise FormStorageError(f"cannot open {self.filepath}: {exc}") from exc
        logger.info("Imported %d form(s)", len(store))
        return store

    def save(self, store: FormStore) -> None:
        data = FormCodec.serialize(store)

        # si contenu identique -> ne rien faire
        if self.filepath.exists():
            try:
                if self.filepath.read_bytes() == data:
                    logger.debug("Archive %s unchanged, nothing written", self.filepath)
                    return
            except OSError as exc:
                logger.warning("Could not compare with existing %s: %s", self.filepath, exc)

        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FormStorageError(f"cannot create {self.filepath.parent}: {exc}") from exc
        self._backup()

        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.filepath.name}.", suffix=".tmp", dir=self.filepath.parent
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_path, self.filepath)
            tmp_path = None
        except OSError as exc:
            raise FormStorageError(f"cannot write {self.filepath}: {exc}") from exc
        finally:
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)
        logger.info("Exported %d form(s) to %s", len(store), self.filepath)
