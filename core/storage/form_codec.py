"""
Encodage / décodage d'une liste de formulaires (archive JSON).

Format :
    {"format": "form-fillout", "version": 1, "forms": [{...}, ...]}

Le numéro de sécurité sociale n'existe pas dans StoredForm : il ne peut
donc pas être écrit. À la relecture il vaut config.REDACTED_SSN.
"""
from __future__ import annotations
import json
import logging
from typing import BinaryIO, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core import config
from core.errors import FormArchiveError, FormStorageError
from core.models.common import Point
from core.models.form import FormData, validation_messages
from core.storage.form_store import FormStore

logger = logging.getLogger(__name__)


class StoredForm(BaseModel):
    """Projection persistée d'un FormData (sans ssn)."""
    model_config = ConfigDict(extra="forbid")

    first_name: str
    middle_initial: str
    last_name: str
    display_name: str
    phone: str
    email: str
    address: str
    signature: List[Point]

    @classmethod
    def from_form(cls, form: FormData) -> "StoredForm":
        return cls(
            first_name=form.first_name,
            middle_initial=form.middle_initial,
            last_name=form.last_name,
            display_name=form.display_name,
            phone=form.phone,
            email=form.email,
            address=form.address,
            signature=list(form.signature.points),
        )

    def to_form(self) -> FormData:
        return FormData(
            first_name=self.first_name,
            middle_initial=self.middle_initial,
            last_name=self.last_name,
            display_name=self.display_name,
            ssn=config.REDACTED_SSN,
            phone=self.phone,
            email=self.email,
            address=self.address,
            signature=self.signature,
        )


class FormArchive(BaseModel):
    model_config = ConfigDict(extra="forbid")

    format: str
    version: int
    forms: List[StoredForm] = Field(min_length=1)

    @field_validator("format")
    @classmethod
    def _format(cls, v: str) -> str:
        if v != config.ARCHIVE_FORMAT:
            raise ValueError(f"not a {config.ARCHIVE_FORMAT} archive")
        return v

    @field_validator("version")
    @classmethod
    def _version(cls, v: int) -> int:
        if v != config.ARCHIVE_VERSION:
            raise ValueError(f"unsupported archive version {v}")
        return v


class FormCodec:

    @staticmethod
    def serialize(store: FormStore) -> bytes:
        archive = FormArchive(
            format=config.ARCHIVE_FORMAT,
            version=config.ARCHIVE_VERSION,
            forms=[StoredForm.from_form(f) for f in store],
        )
        dump = json.dumps(archive.model_dump(mode="json"), ensure_ascii=False, indent=2)
        return dump.encode("utf-8")

    @staticmethod
    def deserialize(data: bytes) -> FormStore:
        # mode strict : "1" n'est pas une version, ["1", true] n'est pas un point
        try:
            archive = FormArchive.model_validate_json(data, strict=True)
            forms = [s.to_form() for s in archive.forms]
        except ValidationError as exc:
            details = "; ".join(_archive_messages(exc))
            raise FormArchiveError(f"invalid form archive: {details}") from exc

        logger.debug("Decoded %d form(s)", len(forms))
        return FormStore(forms)

    # ---------------- Flux ---------------- #

    @staticmethod
    def dump(store: FormStore, stream: BinaryIO) -> None:
        data = FormCodec.serialize(store)
        try:
            stream.write(data)
        except (OSError, ValueError) as exc:  # ValueError : flux déjà fermé
            raise FormStorageError(f"cannot write form archive: {exc}") from exc

    @staticmethod
    def load(stream: BinaryIO) -> FormStore:
        try:
            data = stream.read()
        except (OSError, ValueError) as exc:
            raise FormStorageError(f"cannot read form archive: {exc}") from exc
        return FormCodec.deserialize(data)


def _archive_messages(exc: ValidationError) -> List[str]:
    # les erreurs de FormData (to_form) ont déjà un libellé par champ
    if exc.title == FormData.__name__:
        return validation_messages(exc)
    out: List[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        out.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return out
